"""
Sort Background Colors - Document Model

Document and page objects handed to commands by the host. A document
exposes its current page and a user-facing message channel.
"""

import logging
from typing import List

from models.layer import ChildLayersMixin
from utils.logger import show_status_message


class Page(ChildLayersMixin):
    """Top-level layer list of a document"""

    def __init__(self, name: str = 'Page 1'):
        self.name = name
        self._children = []

    def __repr__(self) -> str:
        return f"Page({self.name!r})"


class Document:
    """Open document: pages plus the message channel

    Messages shown through show_message() are kept in `messages` in
    order, and forwarded to the status bar of the registered main window.
    """

    def __init__(self, name: str = 'Untitled'):
        self._logger = logging.getLogger('Document')
        self.name = name
        self._pages = [Page()]
        self._current_page_index = 0
        self.messages: List[str] = []

    @property
    def pages(self):
        return tuple(self._pages)

    @property
    def current_page(self) -> Page:
        return self._pages[self._current_page_index]

    def add_page(self, name: str) -> Page:
        page = Page(name)
        self._pages.append(page)
        return page

    def set_current_page(self, page: Page):
        """Make the given page current

        Raises:
            ValueError: If the page does not belong to this document
        """
        if page not in self._pages:
            raise ValueError(f"Page {page.name!r} is not part of document {self.name!r}")
        self._current_page_index = self._pages.index(page)

    def show_message(self, text: str):
        """Show a short user-facing message"""
        self.messages.append(text)
        self._logger.debug(f"Message: {text}")
        show_status_message(text)
