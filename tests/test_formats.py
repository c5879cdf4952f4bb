from imgedit.imaging.formats import SUPPORTED_FORMATS, classify_extension, classify_path, file_extension, is_supported
from imgedit.models.enums import ImageFormat

def test_file_extension():
    assert file_extension("thisIsAnImage.jpg") == "jpg"
    assert file_extension("archive.tar.png") == "png"
    assert file_extension("noext") is None
    assert file_extension("trailing.") == ""

def test_supported_formats():
    assert SUPPORTED_FORMATS == {"jpg", "jpeg", "png"}
    assert is_supported("JPEG")
    assert not is_supported("gif")
    assert not is_supported(None)

def test_classify():
    assert classify_extension("jpg") is ImageFormat.JPEG
    assert classify_extension("Jpeg") is ImageFormat.JPEG
    assert classify_extension("png") is ImageFormat.PNG
    assert classify_extension("bmp") is ImageFormat.UNSUPPORTED
    assert classify_extension(None) is ImageFormat.UNSUPPORTED
    assert classify_path("photos/holiday.PNG") is ImageFormat.PNG
    assert classify_path("photos/holiday") is ImageFormat.UNSUPPORTED
