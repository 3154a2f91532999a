"""
Helpers shared by the modal dialogs.
"""


def center_on_parent(dialog, parent):
    """Center a toplevel dialog over its parent window."""
    parent.update_idletasks()
    dialog.update_idletasks()
    pw, ph = parent.winfo_width(), parent.winfo_height()
    px, py = parent.winfo_x(), parent.winfo_y()
    w, h = dialog.winfo_width(), dialog.winfo_height()
    x = px + (pw - w) // 2
    y = py + (ph - h) // 2
    dialog.geometry(f"+{x}+{y}")
