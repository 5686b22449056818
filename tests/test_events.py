from gedcom_records.events import event_label, is_event_tag, is_family_event_tag
from gedcom_records.events.event import is_individual_attribute_tag, is_individual_event_tag


def test_event_tag_groups():
    assert is_individual_event_tag("birt")
    assert not is_individual_event_tag("MARR")
    assert is_family_event_tag("MARR")
    assert is_family_event_tag("EVEN")
    assert is_family_event_tag("resi")
    assert is_individual_attribute_tag("RESI")
    assert is_individual_attribute_tag("OCCU")
    assert not is_individual_attribute_tag("BIRT")
    assert is_event_tag("DIV")
    assert not is_event_tag("")
    assert not is_event_tag("NAME")


def test_event_label():
    assert event_label("BIRT") == "Birth"
    assert event_label("occu") == "Occupation"
    assert event_label("_MILT") == "_MILT"
    assert event_label("") == ""
