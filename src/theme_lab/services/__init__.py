"""Services package (selection state, edit session, infrastructure).

Qt-dependent modules (``tick_scheduler``) are not imported here so headless
code can use the rest of the package without PyQt6 loaded.
"""
