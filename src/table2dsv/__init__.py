"""Convert HTML tables to delimiter-separated text.

Pages are rendered in a headless browser so that the extracted text is what a
reader would see: entities decoded, markup removed, whitespace collapsed.
Quoted-printable soft line breaks left in MHTML archives are removed from the
result.
"""

__version__ = "0.1.0"
