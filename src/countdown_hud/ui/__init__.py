"""NiceGUI surface: widget display and page layout."""
