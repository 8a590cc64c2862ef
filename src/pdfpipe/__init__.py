"""Convert plain text into paginated PDF documents.

The command line interface lives in :mod:`pdfpipe.cli`; the building blocks
are importable for use from other programs::

    from pdfpipe import Configuration, acquire_content, build_document

    cfg = Configuration(input_files=("notes.txt",), page_numbers=True)
    build_document(cfg, acquire_content(cfg))
"""

__version__ = "0.1.0"

from .config import Configuration, load_config  # noqa: E402
from .io import ContentUnit, acquire_content  # noqa: E402
from .render import DocumentBuilder, build_document  # noqa: E402

__all__ = [
    "__version__",
    "Configuration",
    "load_config",
    "ContentUnit",
    "acquire_content",
    "DocumentBuilder",
    "build_document",
]
