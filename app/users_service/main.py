# app/users_service/main.py
from uuid import uuid4

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.domain.schemas import UserIn, UserOut

app = FastAPI(title="Users Service (dev mock)")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


USERS = {
    "u1": {"id": "u1", "name": "Ada", "email": "ada@example.com"},
    "u2": {"id": "u2", "name": "Linus", "email": "linus@example.com"},
}


@app.get("/users", response_model=list[UserOut])
def list_users():
    return list(USERS.values())


@app.get("/users/{user_id}", response_model=UserOut)
def get_user(user_id: str):
    user = USERS.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@app.post("/users", response_model=UserOut, status_code=201)
def create_user(payload: UserIn):
    user_id = payload.id or uuid4().hex[:8]
    if user_id in USERS:
        raise HTTPException(status_code=409, detail="User already exists")
    USERS[user_id] = {"id": user_id, "name": payload.name, "email": payload.email}
    return USERS[user_id]


@app.put("/users/{user_id}", response_model=UserOut)
def update_user(user_id: str, payload: UserIn):
    if user_id not in USERS:
        raise HTTPException(status_code=404, detail="User not found")
    USERS[user_id] = {"id": user_id, "name": payload.name, "email": payload.email}
    return USERS[user_id]


@app.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str):
    # produkty usera zostaja w products-api (brak kaskady)
    if USERS.pop(user_id, None) is None:
        raise HTTPException(status_code=404, detail="User not found")
