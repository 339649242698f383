"""
Data models for the PDF Metadata Viewer.
"""
