import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from db.connection import get_dynamodb_client
from settings import AppConfig
from shared.books import Book, is_valid_book

logger = logging.getLogger("bookstore-lambda")


class StorageError(Exception):
    """The storage backend failed; the message is for logs only."""


class BookStore(ABC):
    """Key-value persistence for books, keyed by ISBN."""

    @abstractmethod
    def fetch(self, isbn: str) -> Optional[Book]:
        """Return the stored book, or None when there is no such ISBN."""

    @abstractmethod
    def store(self, book: Book) -> None:
        """Write the book, replacing any record with the same ISBN."""


class DynamoBookStore(BookStore):
    """Books table in DynamoDB with `isbn` as the partition key."""

    def __init__(self, table_name: str, client=None):
        self.table_name = table_name
        self._client = client
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    @property
    def client(self):
        if self._client is None:
            self._client = get_dynamodb_client()
        return self._client

    def fetch(self, isbn: str) -> Optional[Book]:
        try:
            response = self.client.get_item(
                TableName=self.table_name,
                Key={"isbn": self._serializer.serialize(isbn)},
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to get {isbn!r} from {self.table_name}: {e}") from e

        item = response.get("Item")
        if not item:
            return None
        return self._to_book(item)

    def store(self, book: Book) -> None:
        item = {name: self._serializer.serialize(value) for name, value in book.model_dump().items()}
        try:
            self.client.put_item(TableName=self.table_name, Item=item)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to put {book.isbn!r} into {self.table_name}: {e}") from e

    def _to_book(self, item: dict) -> Book:
        data = {name: self._deserializer.deserialize(value) for name, value in item.items()}
        try:
            book = Book.model_validate(data)
        except ValidationError as e:
            raise StorageError(f"Malformed item in {self.table_name}: {e}") from e
        # Substring ISBN check: items written with strict_isbn off must stay readable
        if not is_valid_book(book, strict=False):
            raise StorageError(f"Incomplete item in {self.table_name}: isbn={book.isbn!r}")
        return book


class InMemoryBookStore(BookStore):
    """Dict-backed store for tests and local runs (storage_backend=memory)."""

    def __init__(self, books: Optional[Dict[str, Book]] = None):
        self.books: Dict[str, Book] = dict(books or {})

    def fetch(self, isbn: str) -> Optional[Book]:
        return self.books.get(isbn)

    def store(self, book: Book) -> None:
        self.books[book.isbn] = book


_memory_store: Optional[InMemoryBookStore] = None


def get_book_store() -> BookStore:
    """Build the store named by the storage_backend setting."""
    global _memory_store
    backend = str(AppConfig.get_value("storage_backend")).lower()
    if backend == "memory":
        # One store per process so a warm container keeps what it was given
        if _memory_store is None:
            _memory_store = InMemoryBookStore()
        return _memory_store
    if backend == "dynamodb":
        return DynamoBookStore(AppConfig.get_value("table_name"))
    raise ValueError(f"Unknown storage backend: {backend}")
