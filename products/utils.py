import uuid

from django.conf import settings
from django.core.files.storage import storages

TEXT_SAMPLE_SIZE = 8192
# Control bytes that still occur in ordinary text files
TEXT_CONTROL_BYTES = b'\t\n\r\f\b\x1b'
BINARY_BYTES = bytes(
    byte for byte in range(32) if byte not in TEXT_CONTROL_BYTES
) + b'\x7f'


def generate_importation_filename():
    """
    Generate a unique importation file name
    Format: <uuid4>.csv
    """
    return f"{uuid.uuid4()}.csv"


def build_importation_storage_name(filename=None):
    """
    Name of the importation file inside the importation storage,
    e.g. ``upload/importations/<uuid4>.csv``.
    """
    location = settings.IMPORTATION_SETTINGS['UPLOAD_LOCATION']
    return f"{location}/{filename or generate_importation_filename()}"


def build_importation_path(storage_name):
    """
    Path recorded on the Importation row, relative to settings.STORAGE_ROOT:
    ``app/upload/importations/<uuid4>.csv``.
    """
    prefix = settings.IMPORTATION_SETTINGS['PATH_PREFIX']
    return f"{prefix}/{storage_name}"


def looks_like_text(file):
    """
    Check the first bytes of an uploaded file for binary content.

    The content type sent by the client is not trusted: browsers report
    csv files as anything from text/csv to application/octet-stream.
    """
    file.seek(0)
    sample = file.read(TEXT_SAMPLE_SIZE)
    file.seek(0)
    if isinstance(sample, str):
        sample = sample.encode('utf-8')
    return not any(byte in BINARY_BYTES for byte in sample)


def get_importation_storage():
    return storages[settings.IMPORTATION_SETTINGS['STORAGE_ALIAS']]


def store_importation_file(file, storage_name):
    """
    Write an uploaded file to the importation storage under storage_name.
    Returns the name the storage actually used.
    """
    return get_importation_storage().save(storage_name, file)
