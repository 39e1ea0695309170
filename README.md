# sateayam

Building blocks for a small catalogue web application for a food stall.
Product categories and products (name, category, stock, description,
picture URL and price in rupiah) are stored in MongoDB, and Flask
blueprints serve the category pages and a home page that lists the
products.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

- `sateayam.config` – `connect(uri, database_name, timeout)` opens a
  connection (by default to `mongodb://localhost:27017`, database
  `sateayammadura`, 10 second timeout), checks that the server answers a
  ping and returns the pymongo database. Connection failures are raised.
- `sateayam.entities` – the `Category` and `Product` dataclasses, with
  `to_document()` and `from_document(document)` for converting to and from
  MongoDB documents. A product's picture URL and price are stored under the
  keys `gambar_url` and `harga`. `from_document` raises `ValueError` when a
  field has the wrong type.
- `sateayam.categorymodel` – `CategoryStore(database)` with `all()`,
  `create(category)`, `detail(category_id)` (returns `None` when missing),
  `get(category_id)` (raises `NotFoundError` when missing),
  `update(category_id, category)` and `delete(category_id)`;
  `parse_object_id(value)` turns a 24-digit hex string into an `ObjectId`
  or raises `ValueError`.
- `sateayam.productmodel` – `ProductStore(database, categories)` with
  `all()`, `create(product)`, `get(product_id)`, `update(product_id, update)`
  and `delete(product_id)`. Products are returned with the name of their
  category filled in from the categories collection. `update` keeps the
  stored picture when the update carries no picture URL, and writes the
  price under the key `price`.
- `sateayam.formatting` – `format_thousands(number)` and
  `format_rupiah(price)`; `format_rupiah(15000)` gives `"Rp 15.000"`.
- `sateayam.categorycontroller` – `create_blueprint(categories)` returns a
  Flask blueprint with `/categories`, `/categories/about`,
  `/categories/add`, `/categories/edit?id=<id>` and
  `/categories/delete?id=<id>`. Successful saves and deletes redirect with
  status 303; errors are answered as plain text.
- `sateayam.homecontroller` – `create_blueprint(products)` returns a
  blueprint that renders the home page at `/` and for every path no other
  route handles.

## Putting an application together

```python
from flask import Flask

from sateayam import categorycontroller, homecontroller
from sateayam.categorymodel import CategoryStore
from sateayam.config import connect
from sateayam.productmodel import ProductStore

database = connect()
categories = CategoryStore(database)
products = ProductStore(database, categories)

app = Flask(__name__, template_folder="views")
app.register_blueprint(categorycontroller.create_blueprint(categories))
app.register_blueprint(homecontroller.create_blueprint(products))
app.run(port=8080)
```

The templates are not part of the package; the blueprints look for:

| Template               | Variables                    |
|------------------------|------------------------------|
| `category/index.html`  | `categories`, `deleted`      |
| `category/create.html` | `Error` (after a failed save)|
| `category/edit.html`   | `category`                   |
| `home/index.html`      | `Products`                   |

## What the package does not do

- It has no command that starts a server; an application has to be put
  together as shown above.
- It serves no product pages: there are no routes to list, show, add, edit
  or delete products, and no handling of picture uploads or serving of
  uploaded pictures. Products can only be managed through `ProductStore`.