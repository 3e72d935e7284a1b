"""Demo catalog served by the mock backend when no live API is configured.

Shapes follow the management API payloads so they validate into the same
models as live responses.
"""

MOCK_CATEGORIES: list[dict] = [
    {
        "id": 15,
        "name": "Apparel",
        "slug": "apparel",
        "description": "Shirts, hoodies and everyday wear.",
        "image": {"id": 301, "src": "/images/mock/apparel.jpg", "name": "apparel", "alt": "Apparel"},
    },
    {
        "id": 16,
        "name": "Accessories",
        "slug": "accessories",
        "description": "Bags, caps and small things.",
        "image": None,
    },
    {
        "id": 17,
        "name": "Home",
        "slug": "home",
        "description": "Mugs, posters and desk gear.",
        "image": {"id": 303, "src": "/images/mock/home.jpg", "name": "home", "alt": "Home"},
    },
]

_APPAREL = {"id": 15, "name": "Apparel", "slug": "apparel"}
_ACCESSORIES = {"id": 16, "name": "Accessories", "slug": "accessories"}
_HOME = {"id": 17, "name": "Home", "slug": "home"}

_TAG_NEW = {"id": 31, "name": "New", "slug": "new"}
_TAG_SALE = {"id": 32, "name": "Sale", "slug": "sale"}
_TAG_HIDDEN = {"id": 33, "name": "Hidden", "slug": "hidden"}


def _image(image_id: int, name: str) -> dict:
    return {"id": image_id, "src": f"/images/mock/{name}.jpg", "name": name, "alt": name.replace("-", " ").title()}


MOCK_PRODUCTS: list[dict] = [
    {
        "id": 42,
        "name": "Classic Tee",
        "slug": "classic-tee",
        "permalink": "/products/classic-tee",
        "description": "Soft cotton t-shirt with a relaxed fit.",
        "short_description": "Cotton t-shirt.",
        "sku": "TEE-001",
        "price": "19.99",
        "regular_price": "19.99",
        "sale_price": "",
        "total_sales": 120,
        "stock_status": "instock",
        "date_created": "2024-03-01T10:00:00",
        "categories": [_APPAREL],
        "tags": [_TAG_NEW],
        "images": [_image(401, "classic-tee")],
        "related_ids": [43, 44],
        "upsell_ids": [43],
    },
    {
        "id": 43,
        "name": "Zip Hoodie",
        "slug": "zip-hoodie",
        "permalink": "/products/zip-hoodie",
        "description": "Heavyweight fleece hoodie with full zip.",
        "short_description": "Fleece hoodie.",
        "sku": "HOOD-001",
        "price": "49.00",
        "regular_price": "59.00",
        "sale_price": "49.00",
        "on_sale": True,
        "total_sales": 80,
        "stock_status": "instock",
        "date_created": "2024-02-10T09:30:00",
        "categories": [_APPAREL],
        "tags": [_TAG_SALE],
        "images": [_image(402, "zip-hoodie")],
        "related_ids": [42],
    },
    {
        "id": 44,
        "name": "Canvas Tote",
        "slug": "canvas-tote",
        "permalink": "/products/canvas-tote",
        "description": "Sturdy canvas bag for groceries and books.",
        "short_description": "Canvas bag.",
        "sku": "BAG-001",
        "price": "15.50",
        "regular_price": "15.50",
        "total_sales": 200,
        "stock_status": "instock",
        "date_created": "2024-01-05T12:00:00",
        "categories": [_ACCESSORIES],
        "tags": [],
        "images": [_image(403, "canvas-tote")],
    },
    {
        "id": 45,
        "name": "Dad Cap",
        "slug": "dad-cap",
        "permalink": "/products/dad-cap",
        "description": "Washed twill cap with adjustable strap.",
        "short_description": "Twill cap.",
        "sku": "CAP-001",
        "price": "24.00",
        "regular_price": "24.00",
        "total_sales": 65,
        "stock_status": "instock",
        "date_created": "2024-04-12T15:45:00",
        "categories": [_ACCESSORIES, _APPAREL],
        "tags": [_TAG_NEW],
        "images": [_image(404, "dad-cap")],
    },
    {
        "id": 46,
        "name": "Enamel Mug",
        "slug": "enamel-mug",
        "permalink": "/products/enamel-mug",
        "description": "Camp-style enamel mug, 350ml.",
        "short_description": "Enamel mug.",
        "sku": "MUG-001",
        "price": "12.00",
        "regular_price": "12.00",
        "total_sales": 150,
        "stock_status": "instock",
        "date_created": "2023-11-20T08:00:00",
        "categories": [_HOME],
        "tags": [_TAG_SALE],
        "images": [_image(405, "enamel-mug")],
    },
    {
        "id": 47,
        "name": "Risograph Poster",
        "slug": "risograph-poster",
        "permalink": "/products/risograph-poster",
        "description": "Two-color riso print, A3.",
        "short_description": "A3 print.",
        "sku": "POS-001",
        "price": "30.00",
        "regular_price": "30.00",
        "total_sales": 12,
        "stock_status": "outofstock",
        "date_created": "2024-05-02T18:20:00",
        "categories": [_HOME],
        "tags": [_TAG_HIDDEN],
        "images": [_image(406, "risograph-poster")],
    },
    {
        "id": 48,
        "name": "Desk Mat",
        "slug": "desk-mat",
        "permalink": "/products/desk-mat",
        "description": "Felt desk mat, 80x30cm.",
        "short_description": "Felt desk mat.",
        "sku": "MAT-001",
        "price": "35.00",
        "regular_price": "35.00",
        "total_sales": 40,
        "stock_status": "instock",
        "date_created": "2024-03-18T11:10:00",
        "categories": [_HOME],
        "tags": [],
        "images": [_image(407, "desk-mat")],
    },
]
