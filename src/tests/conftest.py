"""Pytest configuration and fixtures for the Bakery Manager tests."""

import pytest

from src.services.catalog_store import CatalogStore, reset_catalog_store
from src.services.inventory_controller import InventoryController
from src.utils.config import reset_config


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop the process-wide store and config around every test."""
    reset_catalog_store()
    reset_config()
    yield
    reset_catalog_store()
    reset_config()


@pytest.fixture(scope="function")
def catalog_store():
    """Provide a freshly seeded catalog store."""
    return CatalogStore()


@pytest.fixture(scope="function")
def controller(catalog_store):
    """Provide a controller bound to the fresh store."""
    return InventoryController(catalog_store)


@pytest.fixture(scope="function")
def ctk_root():
    """Provide a hidden CTk root window.

    Widget tests need a real Tk instance; they are skipped when no display
    is available.
    """
    import tkinter

    import customtkinter as ctk

    try:
        root = ctk.CTk()
    except tkinter.TclError as e:
        pytest.skip(f"No display available: {e}")
    root.withdraw()
    yield root
    root.destroy()
