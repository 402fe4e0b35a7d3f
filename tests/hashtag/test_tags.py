"""Tests for metadata display tags."""

from content_tagger.hashtag import MetadataTag, classify_hashtags, metadata_to_tags


class TestMetadataToTags:
    """Test metadata_to_tags function."""

    def test_none_returns_empty(self):
        assert metadata_to_tags(None) == []

    def test_empty_mapping_returns_empty(self):
        assert metadata_to_tags({}) == []

    def test_fixed_category_order(self):
        """Order is Source, Demographics, Sector, Emotions, Brands, Location."""
        metadata = {
            "locations": "seoul",
            "brands": "nike",
            "emotions": "calm",
            "sector": "tech",
            "demographics": "male",
            "source": "youtube",
        }
        assert [tag.category for tag in metadata_to_tags(metadata)] == [
            "Source",
            "Demographics",
            "Sector",
            "Emotions",
            "Brands",
            "Location",
        ]

    def test_empty_values_skipped(self):
        tags = metadata_to_tags({"sector": "beauty", "brands": "", "emotions": None})
        assert tags == [MetadataTag(category="Sector", value="beauty")]

    def test_non_string_values_skipped(self):
        tags = metadata_to_tags({"sector": ["beauty"], "locations": 42, "brands": "nike"})
        assert tags == [MetadataTag(category="Brands", value="nike")]

    def test_unknown_fields_ignored(self):
        assert metadata_to_tags({"topic_category": "beauty"}) == []

    def test_classifier_output(self, sample_hashtags):
        tags = metadata_to_tags(classify_hashtags(sample_hashtags).to_dict())
        assert tags == [
            MetadataTag("Demographics", "female, 25-34"),
            MetadataTag("Sector", "beauty"),
            MetadataTag("Emotions", "happy/positive"),
            MetadataTag("Brands", "fentybeauty"),
            MetadataTag("Location", "seoul"),
        ]
