import pytest

from ddotelmap.inframetadata.host_tags import (
    HostTagsError,
    assert_string_value,
    get_host_tags,
)
from ddotelmap.values import MismatchedTypeError, ValueType


def test_well_known_and_custom_tags():
    tags = get_host_tags(
        {
            "cloud.provider": "aws",
            "deployment.environment": "prod",
            "datadog.host.tag.foo": "bar",
        }
    )
    assert tags == ["cloud_provider:aws", "env:prod", "foo:bar"]


def test_tags_are_sorted():
    tags = get_host_tags(
        {
            "datadog.host.tag.zzz": "1",
            "cloud.region": "us-east-1",
            "datadog.host.tag.aaa": "2",
            "cloud.availability_zone": "us-east-1c",
        }
    )
    assert tags == sorted(tags)
    assert len(tags) == 4


def test_new_environment_convention():
    assert get_host_tags({"deployment.environment.name": "staging"}) == ["env:staging"]


def test_unrelated_attributes_ignored():
    assert get_host_tags({"host.name": "something", "os.type": "linux"}) == []


def test_wrong_type_for_well_known_tag():
    with pytest.raises(HostTagsError) as info:
        get_host_tags({"cloud.provider": True})
    assert [str(e) for e in info.value.errors] == [
        '"cloud.provider" has type "Bool", expected type "Str" instead'
    ]


def test_empty_custom_tag_value():
    with pytest.raises(HostTagsError) as info:
        get_host_tags({"datadog.host.tag.foo": ""})
    assert str(info.value) == (
        'attribute "datadog.host.tag.foo" has empty string value, expected non-empty string'
    )


def test_all_errors_collected():
    with pytest.raises(HostTagsError) as info:
        get_host_tags(
            {
                "datadog.host.tag.a": 1,
                "datadog.host.tag.b": "",
                "cloud.region": ["x"],
                "cloud.provider": "aws",
            }
        )
    assert len(info.value.errors) == 3
    assert isinstance(info.value.errors[0], MismatchedTypeError)


def test_assert_string_value():
    assert assert_string_value("key", "value") == "value"
    with pytest.raises(MismatchedTypeError) as info:
        assert_string_value("key", 5)
    assert info.value.actual_type is ValueType.INT
    assert info.value.expected_type is ValueType.STR