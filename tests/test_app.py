from mandelbrot_explorer.app import pointer_button
from mandelbrot_explorer.selection import PRIMARY, SECONDARY, OTHER


def test_pointer_button_mapping():
    assert pointer_button(1) == PRIMARY
    assert pointer_button(3) == SECONDARY
    assert pointer_button(2) == OTHER
    assert pointer_button(6) == OTHER
