import logging
import requests
from config.constants import BROWSER_HEADERS, DOWNLOAD_TIMEOUT
from core.exceptions import DownloadError

def build_translation_url(base_url: str, version: str, file_name: str) -> str:
    return f"{base_url.rstrip('/')}/translations/{version}/{file_name}"

def fetch_translation(base_url: str, version: str, file_name: str, session=None) -> str:
    """Downloads one translation file. Single attempt, no retries."""
    if not base_url:
        raise DownloadError('Translation server URL is not configured (SERVER_URL)')
    url = build_translation_url(base_url, version, file_name)
    http = session or requests
    try:
        resp = http.get(url, headers=BROWSER_HEADERS, timeout=DOWNLOAD_TIMEOUT)
    except requests.RequestException as e:
        logging.error(f'Error fetching translation {url}: {e}')
        raise DownloadError(f'Failed to download file for version {version}: {e}') from e
    if not resp.ok:
        logging.error(f'Error fetching translation {url}: HTTP {resp.status_code} {resp.reason}')
        raise DownloadError(f'Failed to download file for version {version}: {resp.status_code} {resp.reason}', status_code=resp.status_code)
    if 'charset' not in resp.headers.get('Content-Type', '').lower():
        resp.encoding = 'utf-8'
    return resp.text
