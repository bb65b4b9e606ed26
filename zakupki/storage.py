"""Document store for downloaded pages and parsed tenders."""

import functools

import pymongo

from .models import SavedPage, Tender, from_document, to_document

__all__ = ["TenderStore", "get_mongo_client", "DEFAULT_URI"]

DEFAULT_URI = "mongodb://localhost:55555"
DATABASE = "Tenders"
PAGE_COLLECTION = "html"
TENDER_COLLECTION = "tender"
TIMEOUT = 5.0


@functools.lru_cache(maxsize=None)
def get_mongo_client(uri=DEFAULT_URI):
    """Return the shared client for ``uri``, creating it on first use."""
    return pymongo.MongoClient(uri)


class TenderStore:
    """Saves and loads pages and tenders keyed by their notice number."""

    def __init__(self, client=None):
        if client is None:
            client = get_mongo_client()
        database = client[DATABASE]
        self._pages = database[PAGE_COLLECTION]
        self._tenders = database[TENDER_COLLECTION]

    @staticmethod
    def _upsert(collection, record):
        with pymongo.timeout(TIMEOUT):
            collection.update_one(
                {"notice_number": record.notice_number},
                {"$set": to_document(record)},
                upsert=True,
            )

    @staticmethod
    def _find(collection, model_type, notice_number):
        with pymongo.timeout(TIMEOUT):
            document = collection.find_one({"notice_number": notice_number})
        return None if document is None else from_document(model_type, document)

    def save_page(self, page):
        """Insert or replace the page with the same notice number."""
        self._upsert(self._pages, page)

    def get_page(self, notice_number):
        """Return the stored page for ``notice_number``, or None."""
        return self._find(self._pages, SavedPage, notice_number)

    def save_tender(self, tender):
        """Insert or replace the tender with the same notice number."""
        self._upsert(self._tenders, tender)

    def get_tender(self, notice_number):
        """Return the stored tender for ``notice_number``, or None."""
        return self._find(self._tenders, Tender, notice_number)