from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from trycart.cart import Cart
from trycart.product import Product
from trycart.repository import (
    CartExistsError,
    CartNotFoundError,
    CartRepositoryError,
    CartService,
    InMemoryCartRepository,
    InvalidCartIdError,
    InvalidUserIdError,
)


@pytest.fixture
def repo():
    return InMemoryCartRepository()


def test_create_successful(repo):
    cart_id = repo.create("user123")
    assert cart_id.startswith("cart_user123_")
    assert repo.exists(cart_id) is True


def test_create_empty_user_id(repo):
    with pytest.raises(InvalidUserIdError) as info:
        repo.create("")
    assert str(info.value) == "invalid user ID"


def test_create_user_already_has_cart(repo):
    first = repo.create("existing_user")
    with pytest.raises(CartExistsError) as info:
        repo.create("existing_user")
    assert info.value.cart_id == first
    assert str(info.value) == "cart already exists"


def test_get_by_id_successful(repo):
    cart_id = repo.create("user123")
    result = repo.get_by_id(cart_id)
    assert isinstance(result, Cart)
    assert result.items == {}


def test_get_by_id_empty(repo):
    with pytest.raises(InvalidCartIdError) as info:
        repo.get_by_id("")
    assert str(info.value) == "invalid cart ID"


def test_get_by_id_missing(repo):
    with pytest.raises(CartNotFoundError) as info:
        repo.get_by_id("non_existent")
    assert str(info.value) == "cart not found"


def test_get_by_user_id_successful(repo):
    cart_id = repo.create("user123")
    assert repo.get_by_user_id("user123") is repo.get_by_id(cart_id)


def test_get_by_user_id_empty(repo):
    with pytest.raises(InvalidUserIdError):
        repo.get_by_user_id("")


def test_get_by_user_id_unknown(repo):
    with pytest.raises(CartNotFoundError):
        repo.get_by_user_id("non_existent_user")


def test_get_by_user_id_mapping_without_cart(repo):
    repo._user_carts["orphaned_user"] = "missing_cart_id"
    with pytest.raises(CartNotFoundError):
        repo.get_by_user_id("orphaned_user")


def test_update_successful(repo):
    cart_id = repo.create("user123")
    updated = Cart()
    updated.add_product(Product(id="A", price=Decimal("10.00")), 2)
    repo.update(cart_id, updated)
    assert repo.get_by_id(cart_id) is updated
    assert repo.get_by_id(cart_id).items["A"].quantity == 2


def test_update_empty_id(repo):
    with pytest.raises(InvalidCartIdError, match="invalid cart ID"):
        repo.update("", Cart())


def test_update_none_cart(repo):
    with pytest.raises(ValueError, match="cart cannot be"):
        repo.update("test_cart_id", None)


def test_update_missing(repo):
    with pytest.raises(CartNotFoundError, match="cart not found"):
        repo.update("non_existent", Cart())


def test_delete_successful(repo):
    cart_id = repo.create("user123")
    repo.delete(cart_id)
    with pytest.raises(CartNotFoundError):
        repo.get_by_id(cart_id)
    with pytest.raises(CartNotFoundError):
        repo.get_by_user_id("user123")


def test_delete_frees_user_for_new_cart(repo):
    first = repo.create("user123")
    repo.delete(first)
    second = repo.create("user123")
    assert repo.exists(second) is True
    assert repo.exists(first) is (first == second)


def test_delete_empty_id(repo):
    with pytest.raises(InvalidCartIdError):
        repo.delete("")


def test_delete_missing(repo):
    with pytest.raises(CartNotFoundError):
        repo.delete("non_existent")


def test_exists_existing(repo):
    cart_id = repo.create("user123")
    assert repo.exists(cart_id) is True


def test_exists_missing(repo):
    assert repo.exists("non_existent") is False


def test_exists_empty_id(repo):
    with pytest.raises(InvalidCartIdError):
        repo.exists("")


def test_not_found_shares_base_class(repo):
    with pytest.raises(CartRepositoryError) as info:
        repo.get_by_id("non_existent")
    assert isinstance(info.value, CartNotFoundError)
    assert str(info.value) == "cart not found"


def test_invalid_cart_id_shares_base_class(repo):
    with pytest.raises(CartRepositoryError) as info:
        repo.get_by_id("")
    assert isinstance(info.value, InvalidCartIdError)
    assert str(info.value) == "invalid cart ID"


def test_invalid_user_id_shares_base_class(repo):
    with pytest.raises(CartRepositoryError) as info:
        repo.create("")
    assert isinstance(info.value, InvalidUserIdError)
    assert str(info.value) == "invalid user ID"


def test_cart_exists_shares_base_class(repo):
    first = repo.create("dup")
    with pytest.raises(CartRepositoryError) as info:
        repo.create("dup")
    assert isinstance(info.value, CartExistsError)
    assert info.value.cart_id == first
    assert str(info.value) == "cart already exists"


def test_thread_safety(repo):
    def work(n):
        user_id = f"user{n}"
        cart_id = repo.create(user_id)
        repo.get_by_id(cart_id)
        updated = Cart()
        updated.add_product(
            Product(id=f"product{n}", price=Decimal(n * 100)), n + 1
        )
        repo.update(cart_id, updated)
        return user_id, n

    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(work, range(10)))

    assert len(results) == 10
    for user_id, n in results:
        cart = repo.get_by_user_id(user_id)
        assert cart.items[f"product{n}"].quantity == n + 1


def test_cart_service_holds_repository(repo):
    service = CartService(cart_repo=repo)
    cart_id = service.cart_repo.create("user123")
    assert repo.exists(cart_id) is True