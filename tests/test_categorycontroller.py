from collections import defaultdict
from types import SimpleNamespace

import pytest
from bson import ObjectId
from flask import Flask
from pymongo.errors import PyMongoError

from sateayam.categorycontroller import create_blueprint
from sateayam.categorymodel import CategoryStore
from sateayam.entities import Category


class FakeCollection:
    def __init__(self):
        self.docs = []
        self.fail = False

    def _check(self):
        if self.fail:
            raise PyMongoError("database down")

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def find(self, query):
        self._check()
        return [dict(doc) for doc in self.docs if self._matches(doc, query)]

    def find_one(self, query):
        self._check()
        return next((dict(d) for d in self.docs if self._matches(d, query)), None)

    def insert_one(self, document):
        self._check()
        stored = dict(document)
        stored.setdefault("_id", ObjectId())
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def update_one(self, query, update):
        self._check()
        for doc in self.docs:
            if self._matches(doc, query):
                doc.update(update["$set"])
                break

    def delete_one(self, query):
        self._check()
        for doc in self.docs:
            if self._matches(doc, query):
                self.docs.remove(doc)
                break


@pytest.fixture
def db():
    return defaultdict(FakeCollection)


@pytest.fixture
def store(db):
    return CategoryStore(db)


@pytest.fixture
def views(tmp_path):
    folder = tmp_path / "views"
    (folder / "category").mkdir(parents=True)
    (folder / "category" / "index.html").write_text(
        "{% for c in categories %}[{{ c.name }}]{% endfor %}deleted={{ deleted }}"
    )
    (folder / "category" / "create.html").write_text("create:{{ Error }}")
    (folder / "category" / "edit.html").write_text(
        "edit:{{ category.name }}:{{ category.id }}"
    )
    return folder


def make_client(views, store):
    app = Flask(__name__, template_folder=str(views), static_folder=None)
    app.register_blueprint(create_blueprint(store))
    return app.test_client()


def test_index_lists_categories_and_deleted_flag(views, store):
    store.create(Category(name="Sate"))
    response = make_client(views, store).get("/categories?deleted=success")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "[Sate]deleted=success"


def test_index_reports_database_failure(views, store, db):
    db["categories"].fail = True
    response = make_client(views, store).get("/categories")
    assert response.status_code == 500
    assert response.get_data(as_text=True) == "Gagal mengambil data kategori\n"


def test_index_without_template(tmp_path, store):
    response = make_client(tmp_path, store).get("/categories")
    assert response.status_code == 500
    assert response.get_data(as_text=True) == "Template error\n"


def test_about_page(views, store):
    response = make_client(views, store).get("/categories/about")
    assert response.get_data(as_text=True) == "Ini adalah halaman About Us"


def test_add_form_renders(views, store):
    response = make_client(views, store).get("/categories/add")
    assert response.get_data(as_text=True) == "create:"


def test_add_form_without_template(tmp_path, store):
    response = make_client(tmp_path, store).get("/categories/add")
    assert response.status_code == 500
    assert response.get_data(as_text=True).startswith("Template error: ")


def test_add_creates_and_redirects(views, store):
    response = make_client(views, store).post("/categories/add", data={"name": "Ayam"})
    assert response.status_code == 303
    assert response.headers["Location"] == "/categories"
    assert [c.name for c in store.all()] == ["Ayam"]


def test_add_failure_renders_form_with_error(views, store, db):
    db["categories"].fail = True
    response = make_client(views, store).post("/categories/add", data={"name": "Ayam"})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "create:Gagal menyimpan data kategori"


def test_edit_form_shows_category(views, store):
    category_id = store.create(Category(name="Sate"))
    response = make_client(views, store).get(f"/categories/edit?id={category_id}")
    assert response.get_data(as_text=True) == f"edit:Sate:{category_id}"


def test_edit_form_rejects_bad_id(views, store):
    response = make_client(views, store).get("/categories/edit?id=nope")
    assert response.status_code == 400
    assert response.get_data(as_text=True).startswith("ID tidak valid: ")


def test_edit_form_missing_category(views, store):
    response = make_client(views, store).get(f"/categories/edit?id={ObjectId()}")
    assert response.status_code == 404
    assert response.get_data(as_text=True) == "Data tidak ditemukan\n"


def test_edit_post_updates_name(views, store):
    category_id = store.create(Category(name="Sate"))
    response = make_client(views, store).post(
        "/categories/edit", data={"id": str(category_id), "name": "Gule"}
    )
    assert response.status_code == 303
    assert response.headers["Location"] == "/categories"
    assert store.get(category_id).name == "Gule"


def test_edit_post_missing_category(views, store):
    response = make_client(views, store).post(
        "/categories/edit", data={"id": str(ObjectId()), "name": "Gule"}
    )
    assert response.status_code == 404


def test_delete_removes_and_redirects(views, store):
    category_id = store.create(Category(name="Sate"))
    response = make_client(views, store).get(f"/categories/delete?id={category_id}")
    assert response.status_code == 303
    assert response.headers["Location"] == "/categories?deleted=success"
    assert store.all() == []


def test_delete_rejects_bad_id(views, store):
    response = make_client(views, store).get("/categories/delete?id=123")
    assert response.status_code == 400


def test_delete_reports_database_failure(views, store, db):
    db["categories"].fail = True
    response = make_client(views, store).get(f"/categories/delete?id={ObjectId()}")
    assert response.status_code == 500
    assert response.get_data(as_text=True) == "Gagal menghapus data kategori\n"