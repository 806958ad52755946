from ddotelmap.attributes.system import SystemAttributes


def test_extract_tags():
    assert SystemAttributes(os_type="windows").extract_tags() == ["os.type:windows"]


def test_extract_tags_empty():
    assert SystemAttributes().extract_tags() == []