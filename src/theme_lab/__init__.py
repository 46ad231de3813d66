"""Interactive color theme editor.

Sub-packages:
 - ``design``: pure color / palette logic (no Qt dependency)
 - ``services``: edit session state machine, selection state, event bus, infrastructure
 - ``views``: PyQt6 window acting as the UI collaborator
 - ``app``: bootstrap helpers wiring services together
"""

__version__ = "0.1.0"
