"""Tests for wavetext.utils.sample_text module."""

import numpy as np
import pytest

from wavetext.utils.sample_text import format_sample, read_samples_text, write_samples_text


class TestFormatSample:
    """Tests for format_sample."""

    @pytest.mark.parametrize(
        ("value", "text"),
        [
            (0.015625, "0.015625"),
            (0.0, "0.0"),
            (-1.0, "-1.0"),
            (1 / 32768, "3.0517578125e-05"),
            (0.999969482421875, "0.999969482421875"),
        ],
    )
    def test_default_decimal_rendering(self, value, text):
        """Should use the shortest round-tripping float repr."""
        assert format_sample(value) == text

    def test_numpy_scalar_has_no_wrapper(self):
        """numpy scalars should render like plain floats."""
        assert format_sample(np.float64(0.5)) == "0.5"


class TestWriteSamplesText:
    """Tests for write_samples_text."""

    def test_one_line_per_sample(self, tmpdir_path):
        """Each sample should be its own newline-terminated line."""
        path = tmpdir_path / "out.txt"

        count = write_samples_text(path, np.array([0.5, -0.25, 0.0]))

        assert count == 3
        assert path.read_text() == "0.5\n-0.25\n0.0\n"

    def test_accepts_plain_list(self, tmpdir_path):
        """Should accept any iterable of floats."""
        path = tmpdir_path / "out.txt"

        write_samples_text(path, [0.125, 1])

        assert path.read_text() == "0.125\n1.0\n"

    def test_empty_creates_empty_file(self, tmpdir_path):
        """No samples should still create the file, with no lines."""
        path = tmpdir_path / "empty.txt"

        count = write_samples_text(path, np.array([], dtype=np.float64))

        assert count == 0
        assert path.exists()
        assert path.read_bytes() == b""

    def test_replaces_existing_content(self, tmpdir_path):
        """Writing again should replace, not append."""
        path = tmpdir_path / "out.txt"
        path.write_text("old line 1\nold line 2\nold line 3\nold line 4\n")

        write_samples_text(path, [0.5])

        assert path.read_text() == "0.5\n"

    def test_missing_directory_raises(self, tmpdir_path):
        """A destination in a missing directory should fail."""
        with pytest.raises(OSError):
            write_samples_text(tmpdir_path / "nope" / "out.txt", [0.5])


class TestReadSamplesText:
    """Tests for read_samples_text."""

    def test_reads_lines_in_order(self, tmpdir_path):
        path = tmpdir_path / "in.txt"
        path.write_text("0.5\n-0.25\n3.0517578125e-05\n")

        samples = read_samples_text(path)

        assert samples.tolist() == [0.5, -0.25, 3.0517578125e-05]

    def test_any_whitespace_separates(self, tmpdir_path):
        """Tokens may share lines or be separated by blank lines."""
        path = tmpdir_path / "in.txt"
        path.write_text("0.5 0.25\n\n\t-1.0\n")

        assert read_samples_text(path).tolist() == [0.5, 0.25, -1.0]

    def test_empty_file(self, tmpdir_path):
        path = tmpdir_path / "in.txt"
        path.write_text("")

        samples = read_samples_text(path)

        assert samples.dtype == np.float64
        assert len(samples) == 0

    def test_bad_token_raises(self, tmpdir_path):
        path = tmpdir_path / "in.txt"
        path.write_text("0.5\nloud\n")

        with pytest.raises(ValueError):
            read_samples_text(path)

    def test_round_trip_is_exact(self, tmpdir_path):
        """Written samples should parse back to identical floats."""
        path = tmpdir_path / "out.txt"
        rng = np.random.default_rng(7)
        samples = rng.integers(-32768, 32768, size=500) / 32768.0

        write_samples_text(path, samples)

        assert np.array_equal(read_samples_text(path), samples)
