"""Direct image upload to GuGoTik storage."""

from gugotik.constants import STORAGE_UPLOAD_PATH
from gugotik.services.base import Service
from gugotik.types import as_payload


class GuGoTikStorage(Service):

    def upload_file(self, file) -> dict:
        """
        Upload an image file in a single request.

        Args:
            file: bytes, RawBytes/NamedBlob, or a Path

        Returns:
            {status_code, status_msg, file_url}
        """
        payload = as_payload(file)
        return self.client.call(
            'POST', STORAGE_UPLOAD_PATH,
            files={'file': (payload.filename, payload.data, payload.mime_type)},
            max_retries=0,
        )
