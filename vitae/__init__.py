"""
vitae - HTML resume templating with PDF page sizing

Populates HTML resume templates with structured JSON resume data and renders the
result to preview HTML or a PDF sized to fit the content.

Architecture:
- Templating Context: Resume data model, placeholder substitution, section fragments
- Rendering Context: Page geometry, staging, rasterization and PDF output
"""

__version__ = "0.1.0"
