"""
Tokenizer for the search server.
Splits text into words on the space character and extracts visible text from
HTML documents handed to the directory loader.
"""

import warnings
from pathlib import Path
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


def split_into_words(text: str) -> list[str]:
    """
    Split text into words on the ASCII space character only.

    Runs of spaces never produce empty words. Tabs, newlines and punctuation
    stay inside words, and case is preserved.
    """
    return [word for word in text.split(" ") if word]


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    Text pieces are joined with single spaces so the result can be fed to
    split_into_words.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return " ".join(soup.get_text(separator=" ", strip=True).split())


def read_html_file(filepath: Path) -> str:
    """
    Read HTML file content, handling common encodings.
    """
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")
