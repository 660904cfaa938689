"""Alpine Linux WSL first-boot setup.

Core design goals:
- One linear pipeline of small steps
- Fatal vs recoverable failure declared per step
- All system access through one System object (testable, dry-runnable)
- Centralized logging
"""

__all__ = []
