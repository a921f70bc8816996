# product_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Product Service (dev mock)")


PRODUCTS = {
    "p1": {
        "id": "p1",
        "name": "Paracetamol 500mg",
        "description": "Pain and fever relief tablets",
        "category_id": "c-analgesics",
        "images": ["/images/paracetamol.png"],
        "rating": "4.70",
        "variants": [
            {"name": "10-pack", "price": "500", "wholesalePrice": "420"},
            {"name": "20-pack", "price": "950", "wholesalePrice": "800"},
        ],
        "in_stock": True,
    },
    "p2": {
        "id": "p2",
        "name": "Vitamin C 1000mg",
        "description": "Effervescent vitamin C tablets",
        "category_id": "c-vitamins",
        "images": ["/images/vitamin-c.png"],
        "rating": "4.50",
        "variants": [{"name": "tube of 20", "price": "1200", "wholesalePrice": "1000"}],
        "in_stock": True,
    },
    "p3": {
        "id": "p3",
        "name": "Cough Syrup 100ml",
        "description": "Dry cough relief syrup",
        "category_id": "c-cold-flu",
        "images": [],
        "rating": "4.10",
        "variants": [{"name": "100ml", "price": "850", "wholesalePrice": "700"}],
        "in_stock": False,
    },
}

@app.get("/products/{product_id}")
def get_product(product_id: str):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
