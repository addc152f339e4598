# ==============================================
# BunkIt — Attendance Tracker
# ==============================================
#
# Package Structure:
#
# bunkit/
# ├── subjects/              # Subject records, derived values, store
# ├── persistence/           # Key-value storage and subject save/load
# ├── config.py              # Configuration management
# ├── exceptions.py          # Package exceptions
# ├── attendance_tracker.py  # Orchestrator class
# └── cli.py                 # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
