"""HTTP client adapter for a remote OCR service.

Assumes endpoints:
- POST /recognize (multipart ``file``) -> {"job_id": "..."}
- GET  /result/{job_id} -> {"status": "...", "progress": 0-100, "text": "...", "error": "..."}
"""

import time

import httpx

from idmatch.logging.logger import Log
from idmatch.ocr.base import BaseOcrEngine, ProgressCallback, report_progress
from idmatch.ocr.exceptions import OcrError, OcrNetworkError, OcrTimeoutError

_WAITING = frozenset({"pending", "queued", "accepted", "processing", "recognizing"})
_SUCCEEDED = frozenset({"completed", "succeeded", "done"})
_FAILED = frozenset({"failed", "error"})


class HttpOcrAdapter(BaseOcrEngine):
    """Submits document images to an OCR service and polls for the text."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        poll_interval_seconds: float = 1.0,
        wait_seconds: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self._poll_interval_seconds = poll_interval_seconds
        self._wait_seconds = wait_seconds
        self._transport = transport

    def recognize(
        self,
        image: bytes,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        if not self._base_url:
            raise OcrError("ocr_http_base_url is not configured")
        report_progress(on_progress, 0)
        try:
            with self._client() as client:
                job_id = self._submit(client, image)
                Log.debug(f"OCR job {job_id} submitted")
                return self._wait_for_text(client, job_id, on_progress)
        except httpx.TimeoutException as exc:
            raise OcrTimeoutError(f"OCR service timed out: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise OcrNetworkError(
                f"OCR service returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise OcrNetworkError(f"OCR service network error: {exc}") from exc

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout_seconds,
            transport=self._transport,
        )

    def _submit(self, client: httpx.Client, image: bytes) -> str:
        files = {"file": ("document", image, "application/octet-stream")}
        response = client.post("/recognize", files=files)
        response.raise_for_status()
        data = self._json(response)
        job_id = data.get("job_id") or data.get("id")
        if not isinstance(job_id, str) or not job_id:
            raise OcrError("OCR submit response missing job_id")
        return job_id

    def _wait_for_text(
        self,
        client: httpx.Client,
        job_id: str,
        on_progress: ProgressCallback | None,
    ) -> str:
        deadline = time.monotonic() + self._wait_seconds
        last_progress = 0
        while True:
            response = client.get(f"/result/{job_id}")
            response.raise_for_status()
            data = self._json(response)
            status = str(data.get("status", "")).lower()

            if status in _SUCCEEDED:
                text = data.get("text")
                if not isinstance(text, str):
                    raise OcrError("OCR result missing text")
                report_progress(on_progress, 100)
                return text
            if status in _FAILED:
                raise OcrError(str(data.get("error") or "OCR job failed"))
            if status not in _WAITING:
                Log.warning(f"OCR job {job_id} reported unknown status '{status}'")

            progress = data.get("progress")
            if isinstance(progress, (int, float)) and progress > last_progress:
                last_progress = int(min(progress, 99))
                report_progress(on_progress, last_progress)

            if time.monotonic() >= deadline:
                raise OcrTimeoutError(f"OCR job {job_id} did not finish in time")
            time.sleep(max(self._poll_interval_seconds, 0.0))

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, object]:
        try:
            data = response.json()
        except ValueError as exc:
            raise OcrError(f"OCR service returned invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise OcrError("OCR service response must be a JSON object")
        return data
