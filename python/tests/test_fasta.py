"""Tests for FASTA parsing and writing."""

from unichrom_core.fasta import (
    parse_fasta_file,
    read_first_sequence,
    write_chromosome_fasta,
    write_fragments_fasta,
)


def test_parse_skips_comments_and_blank_lines(tmp_path):
    path = tmp_path / "fragments.fasta"
    path.write_text(
        ">frag_1\n"
        "ATTAGA\n"
        "\n"
        "; split over two lines\n"
        "CCTG\n"
        ">frag_2\n"
        "AGACCTGCCG\n"
        ">frag_3\n"
        "AGACCTGCCG\n"
    )

    assert parse_fasta_file(path) == {"ATTAGACCTG", "AGACCTGCCG"}


def test_parse_missing_file_returns_none(tmp_path):
    assert parse_fasta_file(tmp_path / "missing.fasta") is None


def test_parse_empty_file(tmp_path):
    path = tmp_path / "empty.fasta"
    path.write_text("")

    assert parse_fasta_file(path) == set()


def test_write_chromosome_then_read(tmp_path):
    path = tmp_path / "out.fasta"
    write_chromosome_fasta("ATTAGACCTGCCGGAATAC", path)

    assert path.read_text().startswith(">unichrom")
    assert read_first_sequence(path) == "ATTAGACCTGCCGGAATAC"


def test_written_fragments_parse_back(tmp_path):
    path = tmp_path / "fragments.fasta"
    fragments = ["ATTAGACCTG", "AGACCTGCCG", "CCTGCCGGAA"]
    write_fragments_fasta(fragments, path, prefix="demo")

    assert ">demo_1" in path.read_text()
    assert parse_fasta_file(path) == set(fragments)


def test_parse_undecodable_file_returns_none(tmp_path):
    path = tmp_path / "binary.fasta"
    path.write_bytes(b">a\nAC\xffGT\n")

    assert parse_fasta_file(path) is None


def test_write_fragments_accepts_any_iterable(tmp_path):
    path = tmp_path / "fragments.fasta"
    write_fragments_fasta((fragment for fragment in ["ATTAGACCTG", "AGACCTGCCG"]), path)

    assert parse_fasta_file(path) == {"ATTAGACCTG", "AGACCTGCCG"}
