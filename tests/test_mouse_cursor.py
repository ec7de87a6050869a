from traa.frame import BasicDesktopFrame
from traa.geometry import DesktopSize, DesktopVector
from traa.mouse_cursor import MouseCursor


def test_default_cursor():
    cursor = MouseCursor()
    assert cursor.image is None
    assert cursor.hotspot == DesktopVector(0, 0)


def test_copy_of_copies_image_and_hotspot():
    image = BasicDesktopFrame(DesktopSize(2, 2))
    image.data[:] = bytes(range(len(image.data)))
    cursor = MouseCursor(image, DesktopVector(1, 1))
    copy = MouseCursor.copy_of(cursor)
    assert copy.hotspot == cursor.hotspot
    assert copy.image is not image
    assert bytes(copy.image.data) == bytes(image.data)
    assert copy.image.size == image.size


def test_copy_is_independent_of_original():
    image = BasicDesktopFrame(DesktopSize(1, 1))
    cursor = MouseCursor(image, DesktopVector(0, 0))
    copy = MouseCursor.copy_of(cursor)
    copy.image.data[0] = 9
    assert image.data[0] == 0


def test_copy_without_image_is_empty():
    cursor = MouseCursor(None, DesktopVector(3, 3))
    copy = MouseCursor.copy_of(cursor)
    assert copy.image is None
    assert copy.hotspot == DesktopVector(0, 0)


def test_set_image_and_hotspot():
    cursor = MouseCursor()
    image = BasicDesktopFrame(DesktopSize(4, 4))
    cursor.image = image
    cursor.hotspot = DesktopVector(2, 3)
    assert cursor.image is image
    assert cursor.hotspot == DesktopVector(2, 3)