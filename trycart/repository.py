"""Storage of shopping carts keyed by cart id and by user."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from trycart.cart import Cart


class CartRepositoryError(Exception):
    """Base class for cart storage errors."""

    default_message = "cart repository error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class CartNotFoundError(CartRepositoryError, LookupError):
    """No cart is stored under the requested key."""

    default_message = "cart not found"


class CartExistsError(CartRepositoryError):
    """The user already owns a cart; its id is kept in ``cart_id``."""

    default_message = "cart already exists"

    def __init__(self, cart_id: str, message: str | None = None) -> None:
        super().__init__(message)
        self.cart_id = cart_id


class InvalidCartIdError(CartRepositoryError, ValueError):
    """The cart id is empty."""

    default_message = "invalid cart ID"


class InvalidUserIdError(CartRepositoryError, ValueError):
    """The user id is empty."""

    default_message = "invalid user ID"


@dataclass
class CartData:
    """A stored cart together with its owner and timestamps."""

    id: str
    user_id: str
    cart: Cart
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)


class CartRepository(ABC):
    """Interface of a store of carts."""

    @abstractmethod
    def create(self, user_id: str) -> str:
        """Create an empty cart for ``user_id`` and return its id."""

    @abstractmethod
    def get_by_id(self, cart_id: str) -> Cart:
        """Return the cart stored under ``cart_id``."""

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> Cart:
        """Return the cart owned by ``user_id``."""

    @abstractmethod
    def update(self, cart_id: str, cart: Cart) -> None:
        """Replace the cart stored under ``cart_id``."""

    @abstractmethod
    def delete(self, cart_id: str) -> None:
        """Remove the cart stored under ``cart_id``."""

    @abstractmethod
    def exists(self, cart_id: str) -> bool:
        """Tell whether a cart is stored under ``cart_id``."""


class InMemoryCartRepository(CartRepository):
    """A thread-safe cart store held in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._carts: dict[str, CartData] = {}
        self._user_carts: dict[str, str] = {}

    def create(self, user_id: str) -> str:
        if not user_id:
            raise InvalidUserIdError()
        with self._lock:
            existing = self._user_carts.get(user_id)
            if existing is not None:
                raise CartExistsError(existing)
            cart_id = f"cart_{user_id}_{time.time_ns()}"
            now = datetime.now()
            self._carts[cart_id] = CartData(
                id=cart_id,
                user_id=user_id,
                cart=Cart(),
                created_at=now,
                updated_at=now,
            )
            self._user_carts[user_id] = cart_id
        return cart_id

    def get_by_id(self, cart_id: str) -> Cart:
        if not cart_id:
            raise InvalidCartIdError()
        with self._lock:
            data = self._carts.get(cart_id)
        if data is None:
            raise CartNotFoundError()
        return data.cart

    def get_by_user_id(self, user_id: str) -> Cart:
        if not user_id:
            raise InvalidUserIdError()
        with self._lock:
            cart_id = self._user_carts.get(user_id)
            data = self._carts.get(cart_id) if cart_id is not None else None
        if data is None:
            raise CartNotFoundError()
        return data.cart

    def update(self, cart_id: str, cart: Cart) -> None:
        if not cart_id:
            raise InvalidCartIdError()
        if cart is None:
            raise ValueError("cart cannot be None")
        with self._lock:
            data = self._carts.get(cart_id)
            if data is None:
                raise CartNotFoundError()
            data.cart = cart
            data.updated_at = datetime.now()

    def delete(self, cart_id: str) -> None:
        if not cart_id:
            raise InvalidCartIdError()
        with self._lock:
            data = self._carts.pop(cart_id, None)
            if data is None:
                raise CartNotFoundError()
            self._user_carts.pop(data.user_id, None)

    def exists(self, cart_id: str) -> bool:
        if not cart_id:
            raise InvalidCartIdError()
        with self._lock:
            return cart_id in self._carts


@dataclass
class CartService:
    """Application service working on carts through a repository."""

    cart_repo: CartRepository