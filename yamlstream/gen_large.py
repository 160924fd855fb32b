"""Generation of large YAML files for benchmarking parsers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from yamlstream import generators, nested

OUTPUT_DIR = "bench_yaml"
"""The directory into which the generated YAML files are written."""

FieldWriter = Callable[["Generator", TextIO], None]


class Generator:
    """A seeded YAML writer keeping track of the current indentation."""

    def __init__(self, seed: int = 42) -> None:
        self.rng = random.Random(seed)
        self._indents = [0]

    @property
    def indent(self) -> int:
        """The current indentation."""
        return self._indents[-1]

    def push_indent(self, offset: int) -> None:
        """Push an indentation ``offset`` columns deeper than the current one."""
        self._indents.append(self.indent + offset)

    def pop_indent(self) -> None:
        """Pop the last indentation.

        Raises IndexError when only the base indentation is left.
        """
        if len(self._indents) <= 1:
            raise IndexError("cannot pop the base indentation")
        self._indents.pop()

    def nl(self, writer: TextIO) -> None:
        """Write a newline followed by the current indentation."""
        writer.write("\n" + " " * self.indent)

    def write_lines(self, writer: TextIO, lines: Sequence[str]) -> None:
        """Write the lines, each on its own line at the current indentation."""
        for index, line in enumerate(lines):
            if index:
                self.nl(writer)
            writer.write(line)

    def gen_array(
        self,
        writer: TextIO,
        len_lo: int,
        len_hi: int,
        obj_creator: FieldWriter,
    ) -> None:
        """Write a block sequence of a random length of items made by ``obj_creator``."""
        for index in range(self.rng.randrange(len_lo, len_hi)):
            if index:
                self.nl(writer)
            writer.write("- ")
            self.push_indent(2)
            obj_creator(self, writer)
            self.pop_indent()

    def gen_object(
        self, writer: TextIO, fields: Sequence[tuple[str, FieldWriter]]
    ) -> None:
        """Write a block mapping whose values are written by the given functions."""
        for index, (key, write_value) in enumerate(fields):
            if index:
                self.nl(writer)
            writer.write(f"{key}: ")
            write_value(self, writer)

    def gen_record_array(self, writer: TextIO, items_lo: int, items_hi: int) -> None:
        """Write a sequence of records as made by :meth:`gen_record_object`."""
        self.gen_array(writer, items_lo, items_hi, Generator.gen_record_object)

    def gen_strings_array(
        self,
        writer: TextIO,
        items_lo: int,
        items_hi: int,
        words_lo: int,
        words_hi: int,
    ) -> None:
        """Write a sequence of lorem ipsum one-liners."""

        def write_words(gen: Generator, w: TextIO) -> None:
            w.write(generators.words(gen.rng, words_lo, words_hi))

        self.gen_array(writer, items_lo, items_hi, write_words)

    def gen_record_object(self, writer: TextIO) -> None:
        """Write a record mapping.

        The fields are description (a literal block scalar), authors, hash,
        version, home, repository and pdf.
        """

        def description(gen: Generator, w: TextIO) -> None:
            w.write("|")
            gen.push_indent(2)
            gen.nl(w)
            lines = generators.text(gen.rng, 1, 9, 3, 8, 10, 20, 80 - gen.indent)
            gen.write_lines(w, lines)
            gen.pop_indent()

        def authors(gen: Generator, w: TextIO) -> None:
            gen.push_indent(2)
            gen.nl(w)
            gen.gen_authors_array(w, 1, 10)
            gen.pop_indent()

        fields: list[tuple[str, FieldWriter]] = [
            ("description", description),
            ("authors", authors),
            ("hash", lambda gen, w: w.write(generators.hex_string(gen.rng, 64))),
            ("version", lambda gen, w: w.write(str(generators.integer(gen.rng, 1, 9)))),
            (
                "home",
                lambda gen, w: w.write(generators.url(gen.rng, "https", 0, 1, 0, 0, None)),
            ),
            (
                "repository",
                lambda gen, w: w.write(generators.url(gen.rng, "git", 1, 4, 10, 20, None)),
            ),
            (
                "pdf",
                lambda gen, w: w.write(
                    generators.url(gen.rng, "https", 1, 4, 10, 30, "pdf")
                ),
            ),
        ]
        self.gen_object(writer, fields)

    def gen_authors_array(self, writer: TextIO, items_lo: int, items_hi: int) -> None:
        """Write a sequence of authors as made by :meth:`gen_author_object`."""
        self.gen_array(writer, items_lo, items_hi, Generator.gen_author_object)

    def gen_author_object(self, writer: TextIO) -> None:
        """Write a small mapping with a name and an e-mail address."""
        fields: list[tuple[str, FieldWriter]] = [
            ("name", lambda gen, w: w.write(generators.full_name(gen.rng, 10, 15))),
            ("email", lambda gen, w: w.write(generators.email(gen.rng, 1, 9))),
        ]
        self.gen_object(writer, fields)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the benchmark YAML files."""
    parser = argparse.ArgumentParser(description="Generate large YAML files.")
    parser.add_argument(
        "output_dir",
        nargs="?",
        default=OUTPUT_DIR,
        help=f"directory to write the files into (default: {OUTPUT_DIR})",
    )
    args = parser.parse_args(argv)

    generator = Generator()
    output_path = Path(args.output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    print("Generating big.yaml")
    with (output_path / "big.yaml").open("w", encoding="utf-8") as out:
        generator.gen_record_array(out, 100_000, 100_001)

    print("Generating nested.yaml")
    with (output_path / "nested.yaml").open("w", encoding="utf-8") as out:
        nested.create_deep_object(out, 1_100_000)

    print("Generating small_objects.yaml")
    with (output_path / "small_objects.yaml").open("w", encoding="utf-8") as out:
        generator.gen_authors_array(out, 4_000_000, 4_000_001)

    print("Generating strings_array.yaml")
    with (output_path / "strings_array.yaml").open("w", encoding="utf-8") as out:
        generator.gen_strings_array(out, 1_300_000, 1_300_001, 10, 40)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())