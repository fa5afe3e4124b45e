from task_tracker.tags import CommonTags, normalize_tag, normalize_tags


class TestNormalizeTags:
    def test_trims_lowercases_and_deduplicates(self):
        result = normalize_tags(["  BUG  ", "Bug", "FRONTEND", "frontend", "  ", ""])
        assert set(result) == {CommonTags.BUG, CommonTags.FRONTEND}
        assert len(result) == 2

    def test_drops_blank_entries(self):
        assert normalize_tags(["", "   ", "\t"]) == []

    def test_none_and_empty(self):
        assert normalize_tags(None) == []
        assert normalize_tags([]) == []

    def test_accepts_any_iterable(self):
        assert normalize_tags(t for t in ["Api", "API "]) == ["api"]

    def test_inner_whitespace_is_kept(self):
        assert normalize_tags(["  Needs Review "]) == ["needs review"]


def test_normalize_tag():
    assert normalize_tag("  UrGeNt ") == "urgent"
