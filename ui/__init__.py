"""
UI modules for the PDF Metadata Viewer.
"""

from .main_window import MainWindow
from .drop_zone import DropZone
from .metadata_panel import MetadataGrid, MetadataPanel
from .password_dialog import PasswordDialog

__all__ = [
    'MainWindow',
    'DropZone',
    'MetadataGrid',
    'MetadataPanel',
    'PasswordDialog'
]
