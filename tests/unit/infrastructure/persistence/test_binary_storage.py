"""
Tests pour le format binaire du catalogue.

Verifie la disposition exacte des octets, la relecture et le rejet des
fichiers corrompus (nombre hors bornes, contenu tronque, texte invalide).
"""

import struct

import pytest

from moviedb.core.entities import Movie
from moviedb.core.ports.storage import LoadStatus
from moviedb.core.value_objects import RatingScale
from moviedb.infrastructure.persistence.binary_storage import (
    BinaryCatalogStorage,
    CatalogFormatError,
    decode_movies,
    encode_movies,
)


class TestEncoding:
    """Tests pour encode_movies()."""

    def test_empty_catalog_is_a_single_count(self):
        assert encode_movies([]) == struct.pack("<i", 0)

    def test_byte_layout(self):
        """count, puis id, nom prefixe, annee, langue prefixee, note float64."""
        data = encode_movies([Movie("Amélie", 3, 2001, "French", 5)])
        name = "Amélie".encode("utf-8")
        expected = (
            struct.pack("<i", 1)
            + struct.pack("<i", 3)
            + struct.pack("<Q", len(name))
            + name
            + struct.pack("<i", 2001)
            + struct.pack("<Q", 6)
            + b"French"
            + struct.pack("<d", 5.0)
        )
        assert data == expected


class TestDecoding:
    """Tests pour decode_movies()."""

    def test_decode_preserves_order_and_fields(self, sample_movies):
        decoded = decode_movies(encode_movies(sample_movies), 10, RatingScale.FIVE_STAR)
        assert decoded == sample_movies

    def test_decode_ten_point_ratings(self):
        movies = [
            Movie("A", 1, 2000, "English", 7.5, scale=RatingScale.TEN_POINT),
            Movie("B", 2, 2001, "English", 9.25, scale=RatingScale.TEN_POINT),
        ]
        decoded = decode_movies(encode_movies(movies), 10, RatingScale.TEN_POINT)
        assert [movie.rating for movie in decoded] == [7.5, 9.25]

    def test_count_above_capacity(self, sample_movies):
        with pytest.raises(CatalogFormatError, match="hors bornes"):
            decode_movies(encode_movies(sample_movies), 3, RatingScale.FIVE_STAR)

    def test_negative_count(self):
        with pytest.raises(CatalogFormatError):
            decode_movies(struct.pack("<i", -2), 10, RatingScale.FIVE_STAR)

    def test_empty_buffer(self):
        with pytest.raises(CatalogFormatError, match="tronque"):
            decode_movies(b"", 10, RatingScale.FIVE_STAR)

    def test_truncated_record(self, sample_movies):
        data = encode_movies(sample_movies)
        with pytest.raises(CatalogFormatError):
            decode_movies(data[:-3], 10, RatingScale.FIVE_STAR)

    def test_string_length_beyond_buffer(self):
        data = struct.pack("<i", 1) + struct.pack("<i", 1) + struct.pack("<Q", 1000) + b"abc"
        with pytest.raises(CatalogFormatError):
            decode_movies(data, 10, RatingScale.FIVE_STAR)

    def test_invalid_utf8(self):
        data = (
            struct.pack("<i", 1)
            + struct.pack("<i", 1)
            + struct.pack("<Q", 2)
            + b"\xff\xfe"
            + struct.pack("<i", 2000)
            + struct.pack("<Q", 0)
            + struct.pack("<d", 3.0)
        )
        with pytest.raises(CatalogFormatError, match="decodable"):
            decode_movies(data, 10, RatingScale.FIVE_STAR)

    def test_trailing_bytes(self, sample_movies):
        """Des octets apres le dernier film declare rendent le contenu invalide."""
        data = encode_movies(sample_movies) + b"junk"
        with pytest.raises(CatalogFormatError, match="en trop"):
            decode_movies(data, 10, RatingScale.FIVE_STAR)


class TestBinaryCatalogStorage:
    """Tests pour BinaryCatalogStorage (fichiers reels sous tmp_path)."""

    def test_write_then_read(self, tmp_path, sample_movies):
        storage = BinaryCatalogStorage()
        path = tmp_path / "catalog.bin"

        assert storage.write(sample_movies, path) is True
        result = storage.read(path, 10, RatingScale.FIVE_STAR)

        assert result.status is LoadStatus.LOADED
        assert result.loaded
        assert result.movies == sample_movies

    def test_write_creates_parent_directories(self, tmp_path, sample_movies):
        path = tmp_path / "nested" / "dir" / "catalog.bin"
        assert BinaryCatalogStorage().write(sample_movies, path)
        assert path.exists()

    def test_read_missing_file(self, tmp_path):
        result = BinaryCatalogStorage().read(tmp_path / "absent.bin", 10, RatingScale.FIVE_STAR)
        assert result.status is LoadStatus.MISSING
        assert result.movies == []

    def test_read_corrupt_file(self, tmp_path):
        path = tmp_path / "corrupt.bin"
        path.write_bytes(b"\x01\x00")
        result = BinaryCatalogStorage().read(path, 10, RatingScale.FIVE_STAR)
        assert result.status is LoadStatus.INVALID
        assert result.movies == []
        assert result.error_message

    def test_write_to_directory_fails(self, tmp_path, sample_movies):
        assert BinaryCatalogStorage().write(sample_movies, tmp_path) is False

    def test_write_id_out_of_int32_range_fails_without_file(self, tmp_path):
        """Un id trop grand pour int32 fait echouer l'ecriture sans creer de fichier."""
        path = tmp_path / "catalog.bin"
        movie = Movie("X", 2**31, 2000, "English", 3)
        assert BinaryCatalogStorage().write([movie], path) is False
        assert not path.exists()

    def test_write_unencodable_name_fails_without_file(self, tmp_path):
        """Un surrogate isole (argument non UTF-8) fait echouer l'ecriture."""
        path = tmp_path / "catalog.bin"
        movie = Movie("bad\udcff", 1, 2000, "English", 3)
        assert BinaryCatalogStorage().write([movie], path) is False
        assert not path.exists()

    def test_read_file_with_trailing_bytes(self, tmp_path, sample_movies):
        path = tmp_path / "catalog.bin"
        path.write_bytes(encode_movies(sample_movies) + b"\x00")
        result = BinaryCatalogStorage().read(path, 10, RatingScale.FIVE_STAR)
        assert result.status is LoadStatus.INVALID
        assert result.movies == []
