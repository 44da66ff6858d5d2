from src.brand_watch.brand.segmenter import segment, segment_spans


def test_splits_on_periods_and_newlines():
    assert segment("One. Two\nThree") == ["One", " Two", "Three"]


def test_empty_text_is_single_empty_segment():
    assert segment("") == [""]
    assert segment(None) == [""]


def test_keeps_empty_segments_and_casing():
    assert segment("Acme.\n\nGlobex.") == ["Acme", "", "", "Globex", ""]


def test_spans_match_segments():
    text = "Salesforce is a leading CRM. Others include HubSpot."
    spans = segment_spans(text)
    assert [s.text for s in spans] == segment(text)
    for s in spans:
        assert text[s.start:s.end] == s.text


def test_span_owns_its_terminator():
    spans = segment_spans("ab.cd")
    assert spans[0].contains(2)
    assert spans[1].start == 3
