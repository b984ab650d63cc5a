"""
Test suite for the docx_to_pdf project.
"""
