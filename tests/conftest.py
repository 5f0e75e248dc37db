# tests/conftest.py
import pytest

def pytest_collection_modifyitems(items):
    """Reorder test items so the leaf utilities run before the generators"""
    # Define the priority order for test directories
    test_order = {
        "utils/": 0,
        "signals/": 1,

        # Default priority for other files
        "default": 100
    }

    def get_priority(item):
        """Get priority for a test item based on its path"""
        nodeid = item.nodeid.split('::')[0]  # Get the file path

        # Check if the path contains any of our directories
        for path, priority in test_order.items():
            if path != "default" and path in nodeid:
                return priority

        return test_order["default"]

    # Sort the test items based on priority
    items.sort(key=get_priority)
