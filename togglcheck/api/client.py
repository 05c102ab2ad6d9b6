"""
TogglClient: A client for reading time entries from the Toggl API.
"""
import requests
from typing import Optional, Dict, Any, List, Tuple
from datetime import datetime

from .. import __version__
from ..errors import TransportError
from ..utils.date_utils import since_timestamp

DEFAULT_BASE_URL = "https://api.track.toggl.com"
TIME_ENTRIES_PATH = "/api/v8/time_entries"

class TogglClient:
    """A client for interacting with the Toggl API."""
    
    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL):
        """Initialize the TogglClient.
        
        Args:
            token: Toggl API token
            base_url: API host (optional)
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
    
    @property
    def auth(self) -> Tuple[str, str]:
        """HTTP Basic credential for the token (Toggl expects "api_token" as password)."""
        return (self.token, "api_token")
    
    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": f"togglcheck/{__version__}"}
    
    def api_get(self, url: str, params: Optional[dict] = None) -> Any:
        """Make a GET request to the Toggl API.
        
        Args:
            url: API endpoint URL
            params: Query parameters (optional)
            
        Returns:
            API response as JSON
            
        Raises:
            TransportError: If the request fails or the status is not 200
        """
        try:
            resp = requests.get(url, headers=self.headers, auth=self.auth, params=params)
        except requests.RequestException as e:
            raise TransportError(f"API request failed: {e}") from e
        
        if resp.status_code != 200:
            lines = resp.text.splitlines()
            first_line = lines[0] if lines else ""
            raise TransportError(f"API request failed with status {resp.status_code}: {first_line}",
                                 status=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"API returned invalid JSON: {e}", status=resp.status_code) from e
    
    def get_time_entries(self, since: Optional[int] = None, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Get the user's time entries.
        
        Args:
            since: Only fetch entries started at most this many seconds ago
                (optional; the API's default window is used otherwise)
            now: Reference time for `since` (optional, defaults to now)
            
        Returns:
            List of time entries, in the order the API returned them
        """
        url = f"{self.base_url}{TIME_ENTRIES_PATH}"
        params = {"start_date": since_timestamp(since, now)} if since is not None else None
        entries = self.api_get(url, params)
        if not isinstance(entries, list):
            raise TransportError(f"Expected a list of time entries, got {type(entries).__name__}")
        return entries
