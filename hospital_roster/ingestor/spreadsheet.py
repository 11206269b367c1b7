"""Read staff rosters, including embedded photos, from .xlsx spreadsheets."""

from __future__ import annotations

import base64
import logging
import mimetypes
import posixpath
import re
import xml.etree.ElementTree as ET
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from openpyxl import load_workbook

logger = logging.getLogger(__name__)

# Column order in the roster sheet (1-based spreadsheet columns 1..4)
NAME_COLUMN = 0
DEPARTMENT_COLUMN = 1
POSITION_COLUMN = 2
AVATAR_COLUMN = 3

# WPS binds in-cell pictures with =DISPIMG("ID_...",1)
DISPIMG_PATTERN = re.compile(r'DISPIMG\(\s*"([^"]+)"')

CELL_IMAGES_PART = "xl/cellimages.xml"
CELL_IMAGES_RELS = "xl/_rels/cellimages.xml.rels"
MEDIA_PREFIX = "xl/media/"
R_NAMESPACE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

MATCH_ID = "id"
MATCH_POSITION = "position"
MATCH_FIRST = "first"


@dataclass
class MediaBlob:
    """An image file stored inside the workbook archive."""
    path: str
    data: bytes
    mime_type: str
    image_id: Optional[str] = None

    def to_data_uri(self) -> str:
        payload = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{payload}"


@dataclass
class StaffSheetRow:
    row_number: int
    name: str
    department: str
    position: str
    avatar: Optional[str] = None
    # which strategy paired an embedded image: "id", "position" or "first";
    # None for rows whose avatar is literal cell text
    avatar_match: Optional[str] = None
    image_id: Optional[str] = None


def find_image_reference(value) -> Optional[str]:
    """Return the image id of a DISPIMG reference held in a cell, if any."""
    # array formulas come back as objects carrying the formula in .text
    text = getattr(value, "text", value)
    if not isinstance(text, str) or "DISPIMG" not in text:
        return None
    match = DISPIMG_PATTERN.search(text)
    return match.group(1) if match else None


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _guess_mime_type(path: str) -> str:
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type or "image/jpeg"


def _read_cell_image_bindings(archive: zipfile.ZipFile, names: List[str]) -> Dict[str, str]:
    """Map DISPIMG ids to media paths using the WPS cellimages part."""
    if CELL_IMAGES_PART not in names:
        return {}

    targets: Dict[str, str] = {}
    if CELL_IMAGES_RELS in names:
        rels = ET.fromstring(archive.read(CELL_IMAGES_RELS))
        for rel in rels:
            if _local_name(rel.tag) != "Relationship":
                continue
            target = rel.attrib.get("Target", "")
            if target.startswith("/"):
                target = target.lstrip("/")
            else:
                target = posixpath.normpath(posixpath.join("xl", target))
            targets[rel.attrib.get("Id")] = target

    bindings: Dict[str, str] = {}
    root = ET.fromstring(archive.read(CELL_IMAGES_PART))
    for pic in root.iter():
        if _local_name(pic.tag) != "pic":
            continue
        image_id = None
        embed = None
        for node in pic.iter():
            tag = _local_name(node.tag)
            if tag == "cNvPr":
                image_id = node.attrib.get("name")
            elif tag == "blip":
                embed = node.attrib.get(f"{{{R_NAMESPACE}}}embed")
        if image_id and embed in targets:
            bindings[image_id] = targets[embed]
    return bindings


def read_media(path: Union[str, Path]) -> List[MediaBlob]:
    """
    Collect every image stored in the workbook.

    Images bound to a DISPIMG id come first, then the remaining files under
    xl/media/ in archive order.
    """
    blobs: List[MediaBlob] = []
    with zipfile.ZipFile(path) as archive:
        names = archive.namelist()
        seen = set()

        for image_id, member in _read_cell_image_bindings(archive, names).items():
            if member not in names:
                logger.warning(f"Image {image_id} points at missing part {member}")
                continue
            blobs.append(MediaBlob(member, archive.read(member), _guess_mime_type(member), image_id))
            seen.add(member)

        for member in names:
            if member.startswith(MEDIA_PREFIX) and not member.endswith("/") and member not in seen:
                blobs.append(MediaBlob(member, archive.read(member), _guess_mime_type(member)))

    return blobs


# ============================================================================
# Avatar resolution: tried in order, first hit wins
# ============================================================================

def _match_by_id(image_id: str, ordinal: int, media: List[MediaBlob]) -> Optional[MediaBlob]:
    return next((blob for blob in media if blob.image_id == image_id), None)


def _match_by_position(image_id: str, ordinal: int, media: List[MediaBlob]) -> Optional[MediaBlob]:
    return media[ordinal] if ordinal < len(media) else None


def _match_first(image_id: str, ordinal: int, media: List[MediaBlob]) -> Optional[MediaBlob]:
    return media[0] if media else None


AVATAR_STRATEGIES = (
    (MATCH_ID, _match_by_id),
    (MATCH_POSITION, _match_by_position),
    (MATCH_FIRST, _match_first),
)


def resolve_avatar(image_id: str, ordinal: int,
                   media: List[MediaBlob]) -> Tuple[Optional[MediaBlob], Optional[str]]:
    """Pick an image for the ``ordinal``-th referencing row.

    Returns the blob and the name of the strategy that found it, or
    ``(None, None)`` when the workbook holds no images at all.
    """
    for strategy, match in AVATAR_STRATEGIES:
        blob = match(image_id, ordinal, media)
        if blob is not None:
            return blob, strategy
    return None, None


def _cell_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_staff_sheet(path: Union[str, Path]) -> List[StaffSheetRow]:
    """
    Parse the first worksheet of a staff roster.

    The header row is skipped, as are blank rows. Columns are read by
    position: name, department, position, avatar. Avatars are returned as
    data URIs; pairing them to rows is best effort (see AVATAR_STRATEGIES)
    and the strategy used is reported on each row.

    Args:
        path: Path to the .xlsx file

    Returns:
        Rows in sheet order
    """
    workbook = load_workbook(path, data_only=False)
    try:
        worksheet = workbook.worksheets[0]
        raw_rows = [
            (row_number, list(values))
            for row_number, values in enumerate(worksheet.iter_rows(min_row=2, values_only=True), start=2)
        ]
    finally:
        workbook.close()

    media = read_media(path)

    rows: List[StaffSheetRow] = []
    references = 0
    for row_number, values in raw_rows:
        if all(_cell_text(v) == "" for v in values):
            continue
        values = values + [None] * (AVATAR_COLUMN + 1 - len(values))

        image_id = next((ref for ref in map(find_image_reference, values) if ref), None)
        record = StaffSheetRow(
            row_number=row_number,
            name=_cell_text(values[NAME_COLUMN]),
            department=_cell_text(values[DEPARTMENT_COLUMN]),
            position=_cell_text(values[POSITION_COLUMN]),
            image_id=image_id,
        )

        if image_id:
            blob, strategy = resolve_avatar(image_id, references, media)
            references += 1
            if blob is not None:
                record.avatar = blob.to_data_uri()
                record.avatar_match = strategy
                if strategy != MATCH_ID:
                    logger.warning(f"Row {row_number}: image {image_id} paired by {strategy} fallback ({blob.path})")
            else:
                logger.warning(f"Row {row_number}: image {image_id} not found in workbook")
        else:
            # plain text in the avatar column (e.g. a URL) is passed through as-is
            record.avatar = _cell_text(values[AVATAR_COLUMN]) or None

        rows.append(record)

    logger.info(f"Parsed {len(rows)} staff rows from {path}: "
                f"{references} image references, {len(media)} embedded images")
    if references and not media:
        logger.warning("DISPIMG references found but the workbook carries no image data")
    return rows
