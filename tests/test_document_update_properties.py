import threading

from hypothesis import given, settings, strategies as st

from app.domain.schemas import ProductIn
from app.services.cosmos_products import CosmosProductService
from conftest import FakeContainer

names = st.text(min_size=1, max_size=40)
prices = st.floats(min_value=0, max_value=1e6, allow_nan=False, allow_infinity=False)


def _service_with_product(name, price=1.0):
    container = FakeContainer()
    service = CosmosProductService(container_factory=lambda: container)
    service.create_product(ProductIn(id="p1", name=name, price=price, user_id="u1"))
    return service


@settings(max_examples=50, deadline=None)
@given(name=names, new_price=prices)
def test_update_without_name_keeps_name(name, new_price):
    service = _service_with_product(name)

    updated = service.update_product("p1", ProductIn(price=new_price, user_id="u1"))

    assert updated["name"] == name
    assert updated["price"] == new_price
    assert service.get_product("p1", "u1")["name"] == name


@settings(max_examples=50, deadline=None)
@given(price=prices, new_name=names)
def test_update_without_price_keeps_price(price, new_name):
    service = _service_with_product("Widget", price)

    updated = service.update_product("p1", ProductIn(name=new_name, user_id="u1"))

    assert updated["price"] == price
    assert updated["name"] == new_name


def test_concurrent_updates_end_with_one_of_the_written_names():
    service = _service_with_product("Widget", 10)
    written = [f"name-{i}" for i in range(8)]
    barrier = threading.Barrier(len(written))

    def writer(name):
        barrier.wait()
        service.update_product("p1", ProductIn(name=name, user_id="u1"))

    threads = [threading.Thread(target=writer, args=(n,)) for n in written]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stored = service.get_product("p1", "u1")
    assert stored["name"] in written
    assert stored["price"] == 10
