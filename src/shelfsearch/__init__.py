"""ShelfSearch — Typed CRUD and query-builder layer over a document search engine."""

__version__ = "0.1.0"
