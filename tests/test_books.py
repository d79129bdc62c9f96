"""
Tests for Book Endpoints

This module tests the /api/book endpoints and the public book view.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_add_book_success, test_remove_book_not_in_list
"""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from app.models import Book, BookList, booklist_books
from app.services import booklists as booklist_service


DUNE = {
    "selfLink": "isbn:123",
    "title": "Dune",
    "authors": "Herbert",
}


def count_books(db_session: Session) -> int:
    return db_session.execute(select(func.count()).select_from(Book)).scalar_one()


class TestListBooks:
    """Tests for GET /api/book/all"""

    def test_list_books_empty(self, client: TestClient, auth_headers: dict):
        response = client.get("/api/book/all", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(
        self, client: TestClient, auth_headers: dict, sample_book: Book
    ):
        response = client.get("/api/book/all", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        book = data[0]
        assert book["id"] == sample_book.id
        assert book["title"] == "Dune"
        assert book["selfLink"] == "isbn:123"
        assert book["pageCount"] == "412"
        assert book["salePrice"] == {"amount": 9.99, "currencyCode": "USD"}

    def test_list_books_requires_token(self, client: TestClient):
        response = client.get("/api/book/all")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestAddBookToList:
    """Tests for POST /api/book/post-book-to-list"""

    def test_add_new_book(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        db_session: Session,
    ):
        """A book never seen before is stored and appended."""
        before = sample_booklist.last_edited

        response = client.post(
            "/api/book/post-book-to-list",
            json={"bookListId": sample_booklist.id, "bookBody": DUNE},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Book added to the list successfully"}

        db_session.refresh(sample_booklist)
        assert [b.title for b in sample_booklist.books] == ["Dune"]
        assert sample_booklist.last_edited > before
        assert count_books(db_session) == 1

    def test_add_existing_book_reuses_record(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        sample_book: Book,
        db_session: Session,
    ):
        """A known selfLink is reused without validating the payload."""
        response = client.post(
            "/api/book/post-book-to-list",
            json={
                "bookListId": sample_booklist.id,
                "bookBody": {"selfLink": "isbn:123", "title": "x"},
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert count_books(db_session) == 1
        db_session.refresh(sample_booklist)
        assert [b.id for b in sample_booklist.books] == [sample_book.id]

    def test_add_same_book_to_two_lists(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        private_booklist: BookList,
        db_session: Session,
    ):
        for booklist in (sample_booklist, private_booklist):
            response = client.post(
                "/api/book/post-book-to-list",
                json={"bookListId": booklist.id, "bookBody": DUNE},
                headers=auth_headers,
            )
            assert response.status_code == status.HTTP_200_OK

        assert count_books(db_session) == 1

    def test_add_book_duplicate_in_list(
        self,
        client: TestClient,
        auth_headers: dict,
        booklist_with_book: BookList,
        db_session: Session,
    ):
        response = client.post(
            "/api/book/post-book-to-list",
            json={"bookListId": booklist_with_book.id, "bookBody": DUNE},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Book is already in the list"

        db_session.refresh(booklist_with_book)
        assert len(booklist_with_book.books) == 1

    def test_add_book_invalid_payload(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        db_session: Session,
    ):
        """New books must have a title of at least 3 characters."""
        response = client.post(
            "/api/book/post-book-to-list",
            json={
                "bookListId": sample_booklist.id,
                "bookBody": {"selfLink": "isbn:999", "title": "Du", "authors": "H"},
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"].startswith("title")
        assert count_books(db_session) == 0

    def test_add_book_numeric_page_count(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        db_session: Session,
    ):
        response = client.post(
            "/api/book/post-book-to-list",
            json={
                "bookListId": sample_booklist.id,
                "bookBody": {**DUNE, "pageCount": 412},
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        book = db_session.execute(select(Book)).scalar_one()
        assert book.page_count == "412"

    def test_add_book_booklist_not_found(
        self, client: TestClient, auth_headers: dict, db_session: Session
    ):
        response = client.post(
            "/api/book/post-book-to-list",
            json={"bookListId": 99999, "bookBody": DUNE},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert count_books(db_session) == 0


    def test_add_book_empty_self_link(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        db_session: Session,
    ):
        response = client.post(
            "/api/book/post-book-to-list",
            json={
                "bookListId": sample_booklist.id,
                "bookBody": {**DUNE, "selfLink": ""},
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"].startswith("selfLink")
        assert count_books(db_session) == 0

    def test_add_book_empty_authors(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        db_session: Session,
    ):
        response = client.post(
            "/api/book/post-book-to-list",
            json={
                "bookListId": sample_booklist.id,
                "bookBody": {"selfLink": "x:1", "title": "Dune", "authors": "", "categories": ""},
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"].startswith("authors")
        assert count_books(db_session) == 0

    def test_add_book_empty_optional_field(
        self, client: TestClient, auth_headers: dict, sample_booklist: BookList
    ):
        response = client.post(
            "/api/book/post-book-to-list",
            json={
                "bookListId": sample_booklist.id,
                "bookBody": {**DUNE, "publisher": ""},
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"].startswith("publisher")

    def test_add_book_already_linked_concurrently(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        sample_book: Book,
        db_session: Session,
    ):
        """The unique association wins over a stale in-memory book list."""
        booklist_service.get_booklist(db_session, sample_booklist.id)
        db_session.execute(
            insert(booklist_books).values(
                booklist_id=sample_booklist.id,
                book_id=sample_book.id,
            )
        )

        response = client.post(
            "/api/book/post-book-to-list",
            json={"bookListId": sample_booklist.id, "bookBody": DUNE},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Book is already in the list"

    def test_add_book_stored_concurrently(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        sample_book: Book,
        monkeypatch,
    ):
        """A selfLink stored between lookup and insert is a duplicate, not a 500."""
        monkeypatch.setattr(
            "app.services.catalog.get_book_by_self_link",
            lambda db, self_link: None,
        )

        response = client.post(
            "/api/book/post-book-to-list",
            json={"bookListId": sample_booklist.id, "bookBody": DUNE},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Book already exists"

    def test_add_book_list_id_out_of_range(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/book/post-book-to-list",
            json={"bookListId": 10**23, "bookBody": DUNE},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"].startswith("bookListId")


class TestRemoveBookFromList:
    """Tests for DELETE /api/book/delete-book-from-list"""

    def test_remove_book_success(
        self,
        client: TestClient,
        auth_headers: dict,
        booklist_with_book: BookList,
        sample_book: Book,
        db_session: Session,
    ):
        response = client.request(
            "DELETE",
            "/api/book/delete-book-from-list",
            json={"bookListId": booklist_with_book.id, "bookId": sample_book.id},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Book removed from the list successfully"}

        db_session.refresh(booklist_with_book)
        assert booklist_with_book.books == []
        # The catalog keeps the book
        assert count_books(db_session) == 1

    def test_remove_book_not_in_list(
        self,
        client: TestClient,
        auth_headers: dict,
        sample_booklist: BookList,
        sample_book: Book,
    ):
        response = client.request(
            "DELETE",
            "/api/book/delete-book-from-list",
            json={"bookListId": sample_booklist.id, "bookId": sample_book.id},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Book is not in the list"

    def test_remove_book_not_found(
        self, client: TestClient, auth_headers: dict, sample_booklist: BookList
    ):
        response = client.request(
            "DELETE",
            "/api/book/delete-book-from-list",
            json={"bookListId": sample_booklist.id, "bookId": 99999},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Book not found"

    def test_remove_book_booklist_not_found(
        self, client: TestClient, auth_headers: dict, sample_book: Book
    ):
        response = client.request(
            "DELETE",
            "/api/book/delete-book-from-list",
            json={"bookListId": 99999, "bookId": sample_book.id},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestPublicBook:
    """Tests for GET /api/auth/public/books/{id}"""

    def test_get_book(self, client: TestClient, sample_book: Book):
        response = client.get(f"/api/auth/public/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Dune"

    def test_get_book_not_found(self, client: TestClient):
        response = client.get("/api/auth/public/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_book_id_out_of_range(self, client: TestClient):
        response = client.get("/api/auth/public/books/99999999999999999999999")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
