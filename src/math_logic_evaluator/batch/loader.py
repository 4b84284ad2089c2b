"""Read expressions from a text file or an archive containing one."""
from pathlib import Path
import tarfile
import tempfile
from typing import Any, Callable, ContextManager, Dict, List, NamedTuple, Optional
import zipfile

import py7zr

from math_logic_evaluator.common.models import EvaluationRequest


class ArchiveFormat(NamedTuple):
    """How to open an archive, list its files and extract one of them."""

    label: str
    open: Callable[[Path], ContextManager[Any]]
    names: Callable[[Any], List[str]]
    extract: Callable[[Any, str, Path], None]


# Mapping of archive suffixes to their handlers
ARCHIVE_FORMATS: Dict[str, ArchiveFormat] = {
    ".zip": ArchiveFormat(
        "zip",
        lambda path: zipfile.ZipFile(path, "r"),
        lambda zf: zf.namelist(),
        lambda zf, name, dest: zf.extract(name, path=dest),
    ),
    ".tar.xz": ArchiveFormat(
        "tar.xz",
        lambda path: tarfile.open(path, "r:xz"),
        lambda tf: [m.name for m in tf.getmembers() if m.isfile()],
        lambda tf, name, dest: tf.extract(name, path=dest, filter="data"),
    ),
    ".7z": ArchiveFormat(
        "7z",
        lambda path: py7zr.SevenZipFile(path, mode="r"),
        lambda archive: archive.getnames(),
        lambda archive, name, dest: archive.extract(targets=[name], path=dest),
    ),
}


def split_expressions(content: str) -> List[EvaluationRequest]:
    """
    Split raw text into evaluation requests, one per non-blank line.

    :param str content: File content

    :return: One request per stripped, non-empty line, in file order
    :rtype: List[EvaluationRequest]
    """
    return [EvaluationRequest(expression=line.strip()) for line in content.splitlines() if line.strip()]


def _archive_format(path: Path) -> Optional[ArchiveFormat]:
    """Find the handler for a path, matching ".tar.xz" before single suffixes."""
    return ARCHIVE_FORMATS.get("".join(path.suffixes[-2:])) or ARCHIVE_FORMATS.get(path.suffix)


def _extract_archive(archive_path: Path) -> str:
    """
    Extract the first .txt file found in a supported archive and return its content as a string.

    :param Path archive_path: Path to a .zip, .tar.xz or .7z archive

    :return: Content of the extracted .txt file
    :rtype: str
    :raises ValueError: If no .txt file is found or format is unsupported
    """
    fmt = _archive_format(archive_path)
    if fmt is None:
        raise ValueError(f"📄❌ Unsupported archive format: {''.join(archive_path.suffixes)}")

    # Extract into a temporary directory, never next to the input
    with tempfile.TemporaryDirectory() as tmpdir, fmt.open(archive_path) as handle:
        tmpdir_path = Path(tmpdir)
        txt_files = [name for name in fmt.names(handle) if name.endswith(".txt")]
        if not txt_files:
            raise ValueError(f"📄❌ No .txt file found in {fmt.label} archive")
        fmt.extract(handle, txt_files[0], tmpdir_path)
        return (tmpdir_path / txt_files[0]).read_text(encoding="utf-8")


def read_expressions(input_file: Path) -> List[EvaluationRequest]:
    """
    Load evaluation requests from a plain text file or an archive.

    :param Path input_file: Path to a .txt file or a .zip/.tar.xz/.7z archive

    :return: One request per non-empty line, in file order
    :rtype: List[EvaluationRequest]
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    if input_file.suffix == ".txt":
        content = input_file.read_text(encoding="utf-8")
    else:
        content = _extract_archive(input_file)
    return split_expressions(content)
