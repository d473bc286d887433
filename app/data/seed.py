# app/data/seed.py

# fixture ladowany przez POST /cosmos/seed, id jako int - konwersja na str przy zapisie
SEED_PRODUCTS = [
    {"id": 1, "name": "Keyboard", "price": 199.99},
    {"id": 2, "name": "Mouse", "price": 49.50},
    {"id": 3, "name": "Monitor", "price": 899.00},
    {"id": 4, "name": "Headset", "price": 129.90},
    {"id": 5, "name": "Webcam", "price": 79.00},
]


def seed_documents(user_id: str) -> list[dict]:
    return [{**p, "id": str(p["id"]), "userId": user_id} for p in SEED_PRODUCTS]
