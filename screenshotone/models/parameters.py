"""
Take Parameters
===============

Closed vocabulary of query parameter names understood by the ``/take`` endpoint.
"""

from enum import Enum


class Parameter(str, Enum):
    """Query parameter names."""

    # Content source
    URL = "url"
    HTML = "html"
    MARKDOWN = "markdown"

    # Authentication
    ACCESS_KEY = "access_key"
    SIGNATURE = "signature"

    # Capture target
    SELECTOR = "selector"
    SELECTOR_SCROLL_INTO_VIEW = "selector_scroll_into_view"
    CAPTURE_BEYOND_VIEWPORT = "capture_beyond_viewport"
    SCROLL_INTO_VIEW = "scroll_into_view"
    SCROLL_INTO_VIEW_ADJUST_TOP = "scroll_into_view_adjust_top"
    ERROR_ON_SELECTOR_NOT_FOUND = "error_on_selector_not_found"

    # Output
    FORMAT = "format"
    RESPONSE_TYPE = "response_type"
    IMAGE_QUALITY = "image_quality"
    IMAGE_WIDTH = "image_width"
    IMAGE_HEIGHT = "image_height"
    OMIT_BACKGROUND = "omit_background"
    ATTACHMENT_NAME = "attachment_name"

    # Full page
    FULL_PAGE = "full_page"
    FULL_PAGE_SCROLL = "full_page_scroll"
    FULL_PAGE_SCROLL_DELAY = "full_page_scroll_delay"
    FULL_PAGE_SCROLL_BY = "full_page_scroll_by"
    FULL_PAGE_MAX_HEIGHT = "full_page_max_height"
    FULL_PAGE_ALGORITHM = "full_page_algorithm"

    # Viewport and device emulation
    VIEWPORT_WIDTH = "viewport_width"
    VIEWPORT_HEIGHT = "viewport_height"
    VIEWPORT_DEVICE = "viewport_device"
    VIEWPORT_MOBILE = "viewport_mobile"
    VIEWPORT_HAS_TOUCH = "viewport_has_touch"
    VIEWPORT_LANDSCAPE = "viewport_landscape"
    DEVICE_SCALE_FACTOR = "device_scale_factor"

    # Clip
    CLIP_X = "clip_x"
    CLIP_Y = "clip_y"
    CLIP_WIDTH = "clip_width"
    CLIP_HEIGHT = "clip_height"

    # Geolocation
    GEOLOCATION_LATITUDE = "geolocation_latitude"
    GEOLOCATION_LONGITUDE = "geolocation_longitude"
    GEOLOCATION_ACCURACY = "geolocation_accuracy"

    # Page emulation
    DARK_MODE = "dark_mode"
    REDUCED_MOTION = "reduced_motion"
    MEDIA_TYPE = "media_type"
    TIME_ZONE = "time_zone"
    IP_COUNTRY_CODE = "ip_country_code"

    # PDF
    PDF_PRINT_BACKGROUND = "pdf_print_background"
    PDF_FIT_ONE_PAGE = "pdf_fit_one_page"
    PDF_LANDSCAPE = "pdf_landscape"
    PDF_PAPER_FORMAT = "pdf_paper_format"
    PDF_MARGIN = "pdf_margin"
    PDF_MARGIN_TOP = "pdf_margin_top"
    PDF_MARGIN_RIGHT = "pdf_margin_right"
    PDF_MARGIN_BOTTOM = "pdf_margin_bottom"
    PDF_MARGIN_LEFT = "pdf_margin_left"

    # Blocking
    BLOCK_ADS = "block_ads"
    BLOCK_COOKIE_BANNERS = "block_cookie_banners"
    BLOCK_BANNERS_BY_HEURISTICS = "block_banners_by_heuristics"
    BLOCK_CHATS = "block_chats"
    BLOCK_TRACKERS = "block_trackers"
    BLOCK_REQUESTS = "block_requests"
    BLOCK_RESOURCES = "block_resources"

    # Cache
    CACHE = "cache"
    CACHE_TTL = "cache_ttl"
    CACHE_KEY = "cache_key"

    # Request passthrough
    USER_AGENT = "user_agent"
    AUTHORIZATION = "authorization"
    COOKIES = "cookies"
    HEADERS = "headers"
    PROXY = "proxy"
    BYPASS_CSP = "bypass_csp"
    IGNORE_HOST_ERRORS = "ignore_host_errors"

    # Waiting
    DELAY = "delay"
    TIMEOUT = "timeout"
    NAVIGATION_TIMEOUT = "navigation_timeout"
    WAIT_UNTIL = "wait_until"
    WAIT_FOR_SELECTOR = "wait_for_selector"

    # DOM interaction
    CLICK = "click"
    ERROR_ON_CLICK_SELECTOR_NOT_FOUND = "error_on_click_selector_not_found"
    HIDE_SELECTORS = "hide_selectors"
    STYLES = "styles"
    SCRIPTS = "scripts"
    SCRIPTS_WAIT_UNTIL = "scripts_wait_until"

    # Content assertions
    FAIL_IF_CONTENT_CONTAINS = "fail_if_content_contains"
    FAIL_IF_CONTENT_MISSING = "fail_if_content_missing"

    # Cloud storage
    STORE = "store"
    STORAGE_PATH = "storage_path"
    STORAGE_ENDPOINT = "storage_endpoint"
    STORAGE_ACCESS_KEY_ID = "storage_access_key_id"
    STORAGE_SECRET_ACCESS_KEY = "storage_secret_access_key"
    STORAGE_BUCKET = "storage_bucket"
    STORAGE_CLASS = "storage_class"
    STORAGE_ACL = "storage_acl"
    STORAGE_RETURN_LOCATION = "storage_return_location"

    # Async and webhooks
    ASYNC = "async"
    WEBHOOK_URL = "webhook_url"
    WEBHOOK_SIGN = "webhook_sign"
    WEBHOOK_ERRORS = "webhook_errors"
    EXTERNAL_IDENTIFIER = "external_identifier"

    # Metadata
    METADATA_IMAGE_SIZE = "metadata_image_size"
    METADATA_FONTS = "metadata_fonts"
    METADATA_OPEN_GRAPH = "metadata_open_graph"
    METADATA_PAGE_TITLE = "metadata_page_title"
    METADATA_CONTENT = "metadata_content"
    METADATA_HTTP_RESPONSE_STATUS_CODE = "metadata_http_response_status_code"
    METADATA_HTTP_RESPONSE_HEADERS = "metadata_http_response_headers"
    METADATA_ICON = "metadata_icon"

    # Vision
    VISION_PROMPT = "vision_prompt"
    VISION_MAX_TOKENS = "vision_max_tokens"
    OPENAI_API_KEY = "openai_api_key"

    # Rendering
    REQUEST_GPU_RENDERING = "request_gpu_rendering"


CONTENT_SOURCES = frozenset({Parameter.URL, Parameter.HTML, Parameter.MARKDOWN})
