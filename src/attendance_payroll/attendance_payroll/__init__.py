"""Attendance & Payroll package.

This package is organized by feature modules (jalali, settings, employees,
attendance, financials, payroll, dashboard) with a thin Flask controller layer
over service/repository layers. The calculation modules are pure functions.
"""
