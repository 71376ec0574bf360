"""EverythingSings static profile site generator.

This package renders a single-page personal profile from a small, fixed
content model. The page carries three parallel semantic encodings of the same
identity: JSON-LD structured data, Microformats2 h-card classes and
Schema.org microdata, so search engines, AI crawlers and IndieWeb tooling can
all read it.

The main entry point is the CLI module, whose ``generate`` command writes the
document and copies static assets into the output directory.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
