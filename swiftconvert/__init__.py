"""
SwiftConvert client - operation dispatch for a remote document toolkit.

Provides:
- Conversion compatibility rules and operation catalog
- File selection validation
- Multipart request building and the remote operation client
- Artifact downloads
- A session state machine exposed over HTTP to the presentation layer
"""

__version__ = "1.0.0"
__description__ = "Operation dispatch and file compatibility client for SwiftConvert"

# Export main application
from .main import app

__all__ = ["app"]
