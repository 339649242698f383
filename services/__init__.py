"""
Services wrapping the PDF library.
"""
