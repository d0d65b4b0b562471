"""QR attendance package.

Organized by feature modules (attendance, devices, sessions, roster, reports,
...) with a thin Flask controller layer over service/repository layers that
share one key-value store.
"""
