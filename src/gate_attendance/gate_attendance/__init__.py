"""Gate Attendance package.

Organized by feature modules (staff, attendance, dashboard, reports, users)
with a thin Flask controller layer over service/repository layers. Storage is
a Google Sheets spreadsheet or a MySQL database behind the same repositories.
"""
