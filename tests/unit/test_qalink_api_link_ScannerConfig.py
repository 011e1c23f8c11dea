"""Unit tests for qalink.api.link.ScannerConfig."""

import pytest
from pydantic import ValidationError

from qalink.api.link.ScannerConfig import ScannerConfig

pytestmark = pytest.mark.link


class TestScannerConfig:
    def test_defaults(self):
        config = ScannerConfig()
        assert config.path_segment == "questions"
        assert config.hash_marker == "#"
        assert config.scan_paths is True
        assert config.scan_hashes is True

    @pytest.mark.parametrize("segment", ["", "a/b", "questions/", "q s", "Q", "q1", "Questions"])
    def test_invalid_path_segment(self, segment):
        """Test segments may not contain id token characters (digits, upper case)."""
        with pytest.raises(ValidationError):
            ScannerConfig(path_segment=segment)

    @pytest.mark.parametrize("marker", ["", "a", "1", " ", "##"])
    def test_invalid_hash_marker(self, marker):
        with pytest.raises(ValidationError):
            ScannerConfig(hash_marker=marker)

    def test_lowercase_segment_with_separators(self):
        assert ScannerConfig(path_segment="my_q-route").path_segment == "my_q-route"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            ScannerConfig(unknown=True)  # type: ignore

    def test_frozen(self):
        config = ScannerConfig()
        with pytest.raises(ValidationError):
            config.path_segment = "q"  # type: ignore

    def test_hashable(self):
        """Test equal configs hash equally so they can share compiled patterns."""
        assert hash(ScannerConfig(path_segment="q")) == hash(ScannerConfig(path_segment="q"))
