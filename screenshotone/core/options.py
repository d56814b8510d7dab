"""
Take Options
============

Builder for ``/take`` request options and the ordered multi-map it accumulates.

Every setter serializes its value to the exact text sent on the wire and appends
it under a fixed parameter name. Setters return the options object so calls can
be chained in any order; the query string is sorted by name when encoded, so the
chaining order never changes the request.
"""

import math
from decimal import Decimal
from typing import Dict, Iterator, List, Tuple, Union
from urllib.parse import quote_plus

from screenshotone.models.parameters import Parameter, CONTENT_SOURCES

ParameterName = Union[Parameter, str]


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_int(value: int) -> str:
    return str(value)


def format_float(value: float) -> str:
    """Format a float as the shortest round-trip decimal, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    # repr() is the shortest round-trip form; Decimal drops the exponent and trailing zeros
    return format(Decimal(repr(float(value))).normalize(), "f")


def _name(name: ParameterName) -> str:
    return name.value if isinstance(name, Parameter) else name


class ParameterSet:
    """Ordered multi-map of parameter name to one or more string values."""

    def __init__(self) -> None:
        self._values: Dict[str, List[str]] = {}

    def add(self, name: ParameterName, value: str) -> None:
        """Append a value under ``name``, keeping earlier values."""
        self._values.setdefault(_name(name), []).append(value)

    def set(self, name: ParameterName, value: str) -> None:
        """Replace every value of ``name`` with a single value."""
        self._values[_name(name)] = [value]

    def get_all(self, name: ParameterName) -> List[str]:
        return list(self._values.get(_name(name), []))

    def copy(self) -> "ParameterSet":
        clone = ParameterSet()
        clone._values = {name: list(values) for name, values in self._values.items()}
        return clone

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, value)`` pairs sorted by name, values in append order."""
        for name in sorted(self._values):
            for value in self._values[name]:
                yield name, value

    def encode(self) -> str:
        """
        Serialize into the canonical query string.

        Names are sorted, each name and value is form-encoded on its own
        (space as ``+``, only ``A-Z a-z 0-9 - _ . ~`` left literal) and pairs
        are joined with ``&``. The signature is computed over these exact bytes.

        Returns:
            Encoded query string without a leading ``?``
        """
        return "&".join(
            f"{quote_plus(name, safe='')}={quote_plus(value, safe='')}"
            for name, value in self.items()
        )

    def __contains__(self, name: object) -> bool:
        if isinstance(name, (Parameter, str)):
            return _name(name) in self._values
        return False

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterSet({self._values!r})"


class TakeOptions:
    """
    Options for the ``/take`` method.

    Create instances with :meth:`url`, :meth:`html` or :meth:`markdown`, then
    chain setters. An options object is meant to be built from a single thread
    before it is handed to a client; concurrent mutation is not supported.
    """

    def __init__(self, source: Parameter, value: str):
        if source not in CONTENT_SOURCES:
            raise ValueError(f"{source!r} is not a content source parameter")

        self._parameters = ParameterSet()
        self._parameters.add(source, value)

    @classmethod
    def url(cls, url: str) -> "TakeOptions":
        """Render the page at ``url``."""
        return cls(Parameter.URL, url)

    @classmethod
    def html(cls, html: str) -> "TakeOptions":
        """Render inline HTML markup."""
        return cls(Parameter.HTML, html)

    @classmethod
    def markdown(cls, markdown: str) -> "TakeOptions":
        """Render inline Markdown text."""
        return cls(Parameter.MARKDOWN, markdown)

    @property
    def parameters(self) -> ParameterSet:
        """Copy of the accumulated parameters."""
        return self._parameters.copy()

    def _add(self, name: Parameter, value: str) -> "TakeOptions":
        self._parameters.add(name, value)
        return self

    def _add_all(self, name: Parameter, values: Tuple[str, ...]) -> "TakeOptions":
        for value in values:
            self._parameters.add(name, value)
        return self

    # Capture target

    def selector(self, selector: str) -> "TakeOptions":
        """Capture only the element matching the CSS selector."""
        return self._add(Parameter.SELECTOR, selector)

    def selector_scroll_into_view(self, scroll: bool) -> "TakeOptions":
        """Scroll the selected element into view before capturing it."""
        return self._add(Parameter.SELECTOR_SCROLL_INTO_VIEW, format_bool(scroll))

    def capture_beyond_viewport(self, capture: bool) -> "TakeOptions":
        return self._add(Parameter.CAPTURE_BEYOND_VIEWPORT, format_bool(capture))

    def scroll_into_view(self, selector: str) -> "TakeOptions":
        """Scroll to the element matching the selector before capturing the viewport."""
        return self._add(Parameter.SCROLL_INTO_VIEW, selector)

    def scroll_into_view_adjust_top(self, pixels: int) -> "TakeOptions":
        return self._add(Parameter.SCROLL_INTO_VIEW_ADJUST_TOP, format_int(pixels))

    def error_on_selector_not_found(self, error: bool) -> "TakeOptions":
        """Fail the request when the selector does not match any element."""
        return self._add(Parameter.ERROR_ON_SELECTOR_NOT_FOUND, format_bool(error))

    # Output

    def format(self, format: str) -> "TakeOptions":
        """Response format, e.g. "png", "jpeg", "jpg", "webp" or "pdf"."""
        return self._add(Parameter.FORMAT, format)

    def response_type(self, response_type: str) -> "TakeOptions":
        """Response type: "by_format", "empty" or "json"."""
        return self._add(Parameter.RESPONSE_TYPE, response_type)

    def image_quality(self, quality: int) -> "TakeOptions":
        """Image quality for the "jpeg" ("jpg") and "webp" formats."""
        return self._add(Parameter.IMAGE_QUALITY, format_int(quality))

    def image_width(self, width: int) -> "TakeOptions":
        """Resize the resulting image to the width (pixels)."""
        return self._add(Parameter.IMAGE_WIDTH, format_int(width))

    def image_height(self, height: int) -> "TakeOptions":
        """Resize the resulting image to the height (pixels)."""
        return self._add(Parameter.IMAGE_HEIGHT, format_int(height))

    def omit_background(self, omit: bool) -> "TakeOptions":
        """
        Render a transparent background.

        Works only if the site has not defined a background color and only for
        the "png" and "webp" formats.
        """
        return self._add(Parameter.OMIT_BACKGROUND, format_bool(omit))

    def attachment_name(self, name: str) -> "TakeOptions":
        """Return the result as an attachment with the given file name."""
        return self._add(Parameter.ATTACHMENT_NAME, name)

    # Full page

    def full_page(self, full_page: bool) -> "TakeOptions":
        """Render the full page."""
        return self._add(Parameter.FULL_PAGE, format_bool(full_page))

    def full_page_scroll(self, scroll: bool) -> "TakeOptions":
        """Scroll through the page before a full page capture to trigger lazy loading."""
        return self._add(Parameter.FULL_PAGE_SCROLL, format_bool(scroll))

    def full_page_scroll_delay(self, delay: int) -> "TakeOptions":
        """Delay between scrolls in milliseconds."""
        return self._add(Parameter.FULL_PAGE_SCROLL_DELAY, format_int(delay))

    def full_page_scroll_by(self, pixels: int) -> "TakeOptions":
        return self._add(Parameter.FULL_PAGE_SCROLL_BY, format_int(pixels))

    def full_page_max_height(self, height: int) -> "TakeOptions":
        return self._add(Parameter.FULL_PAGE_MAX_HEIGHT, format_int(height))

    def full_page_algorithm(self, algorithm: str) -> "TakeOptions":
        """Full page algorithm: "default" or "by_sections"."""
        return self._add(Parameter.FULL_PAGE_ALGORITHM, algorithm)

    # Viewport and device emulation

    def viewport_width(self, width: int) -> "TakeOptions":
        """Width of the browser viewport (pixels)."""
        return self._add(Parameter.VIEWPORT_WIDTH, format_int(width))

    def viewport_height(self, height: int) -> "TakeOptions":
        """Height of the browser viewport (pixels)."""
        return self._add(Parameter.VIEWPORT_HEIGHT, format_int(height))

    def viewport_device(self, device: str) -> "TakeOptions":
        """Emulate a known device by its identifier, e.g. "iphone_13_pro_max"."""
        return self._add(Parameter.VIEWPORT_DEVICE, device)

    def viewport_mobile(self, mobile: bool) -> "TakeOptions":
        return self._add(Parameter.VIEWPORT_MOBILE, format_bool(mobile))

    def viewport_has_touch(self, has_touch: bool) -> "TakeOptions":
        return self._add(Parameter.VIEWPORT_HAS_TOUCH, format_bool(has_touch))

    def viewport_landscape(self, landscape: bool) -> "TakeOptions":
        return self._add(Parameter.VIEWPORT_LANDSCAPE, format_bool(landscape))

    def device_scale_factor(self, factor: int) -> "TakeOptions":
        """Device scale factor, one of 1, 2 or 3."""
        return self._add(Parameter.DEVICE_SCALE_FACTOR, format_int(factor))

    # Clip

    def clip_x(self, x: int) -> "TakeOptions":
        return self._add(Parameter.CLIP_X, format_int(x))

    def clip_y(self, y: int) -> "TakeOptions":
        return self._add(Parameter.CLIP_Y, format_int(y))

    def clip_width(self, width: int) -> "TakeOptions":
        return self._add(Parameter.CLIP_WIDTH, format_int(width))

    def clip_height(self, height: int) -> "TakeOptions":
        return self._add(Parameter.CLIP_HEIGHT, format_int(height))

    # Geolocation

    def geolocation_latitude(self, latitude: float) -> "TakeOptions":
        """
        Geolocation latitude for the request.

        Both latitude and longitude are required if one of them is set.
        """
        return self._add(Parameter.GEOLOCATION_LATITUDE, format_float(latitude))

    def geolocation_longitude(self, longitude: float) -> "TakeOptions":
        """
        Geolocation longitude for the request.

        Both latitude and longitude are required if one of them is set.
        """
        return self._add(Parameter.GEOLOCATION_LONGITUDE, format_float(longitude))

    def geolocation_accuracy(self, accuracy: int) -> "TakeOptions":
        """Geolocation accuracy in meters."""
        return self._add(Parameter.GEOLOCATION_ACCURACY, format_int(accuracy))

    # Page emulation

    def dark_mode(self, dark_mode: bool) -> "TakeOptions":
        """Emulate the dark color scheme preference."""
        return self._add(Parameter.DARK_MODE, format_bool(dark_mode))

    def reduced_motion(self, reduced_motion: bool) -> "TakeOptions":
        return self._add(Parameter.REDUCED_MOTION, format_bool(reduced_motion))

    def media_type(self, media_type: str) -> "TakeOptions":
        """CSS media type: "screen" or "print"."""
        return self._add(Parameter.MEDIA_TYPE, media_type)

    def time_zone(self, time_zone: str) -> "TakeOptions":
        """Time zone for the request, e.g. "Europe/Berlin" or "America/Santiago"."""
        return self._add(Parameter.TIME_ZONE, time_zone)

    def ip_country_code(self, country_code: str) -> "TakeOptions":
        """Route the request through an IP address from the given country."""
        return self._add(Parameter.IP_COUNTRY_CODE, country_code)

    # PDF

    def pdf_print_background(self, print_background: bool) -> "TakeOptions":
        return self._add(Parameter.PDF_PRINT_BACKGROUND, format_bool(print_background))

    def pdf_fit_one_page(self, fit_one_page: bool) -> "TakeOptions":
        """Fit the whole page into a single PDF page."""
        return self._add(Parameter.PDF_FIT_ONE_PAGE, format_bool(fit_one_page))

    def pdf_landscape(self, landscape: bool) -> "TakeOptions":
        return self._add(Parameter.PDF_LANDSCAPE, format_bool(landscape))

    def pdf_paper_format(self, paper_format: str) -> "TakeOptions":
        """Paper format, e.g. "a4" or "letter"."""
        return self._add(Parameter.PDF_PAPER_FORMAT, paper_format)

    def pdf_margin(self, margin: str) -> "TakeOptions":
        """Margin for every side of the PDF page, with units, e.g. "10px"."""
        return self._add(Parameter.PDF_MARGIN, margin)

    def pdf_margin_top(self, margin: str) -> "TakeOptions":
        return self._add(Parameter.PDF_MARGIN_TOP, margin)

    def pdf_margin_right(self, margin: str) -> "TakeOptions":
        return self._add(Parameter.PDF_MARGIN_RIGHT, margin)

    def pdf_margin_bottom(self, margin: str) -> "TakeOptions":
        return self._add(Parameter.PDF_MARGIN_BOTTOM, margin)

    def pdf_margin_left(self, margin: str) -> "TakeOptions":
        return self._add(Parameter.PDF_MARGIN_LEFT, margin)

    # Blocking

    def block_ads(self, block: bool) -> "TakeOptions":
        """Block ads."""
        return self._add(Parameter.BLOCK_ADS, format_bool(block))

    def block_cookie_banners(self, block: bool) -> "TakeOptions":
        """Block cookie consent banners."""
        return self._add(Parameter.BLOCK_COOKIE_BANNERS, format_bool(block))

    def block_banners_by_heuristics(self, block: bool) -> "TakeOptions":
        return self._add(Parameter.BLOCK_BANNERS_BY_HEURISTICS, format_bool(block))

    def block_chats(self, block: bool) -> "TakeOptions":
        """Block live chat widgets."""
        return self._add(Parameter.BLOCK_CHATS, format_bool(block))

    def block_trackers(self, block: bool) -> "TakeOptions":
        """Block trackers."""
        return self._add(Parameter.BLOCK_TRACKERS, format_bool(block))

    def block_requests(self, *patterns: str) -> "TakeOptions":
        """Block requests by URL, domain or a simple pattern such as "*example*"."""
        return self._add_all(Parameter.BLOCK_REQUESTS, patterns)

    def block_resources(self, *resource_types: str) -> "TakeOptions":
        """
        Block loading resources by type.

        Available resource types are: "document", "stylesheet", "image", "media",
        "font", "script", "texttrack", "xhr", "fetch", "eventsource", "websocket",
        "manifest", "other".
        """
        return self._add_all(Parameter.BLOCK_RESOURCES, resource_types)

    # Cache

    def cache(self, cache: bool) -> "TakeOptions":
        """Cache the result on the service side."""
        return self._add(Parameter.CACHE, format_bool(cache))

    def cache_ttl(self, ttl: int) -> "TakeOptions":
        """Cache time to live in seconds."""
        return self._add(Parameter.CACHE_TTL, format_int(ttl))

    def cache_key(self, key: str) -> "TakeOptions":
        return self._add(Parameter.CACHE_KEY, key)

    # Request passthrough

    def user_agent(self, user_agent: str) -> "TakeOptions":
        """User agent for the request."""
        return self._add(Parameter.USER_AGENT, user_agent)

    def authorization(self, authorization: str) -> "TakeOptions":
        """Authorization header value for the request."""
        return self._add(Parameter.AUTHORIZATION, authorization)

    def cookies(self, *cookies: str) -> "TakeOptions":
        """Cookies for the request, each in the "name=value" form."""
        return self._add_all(Parameter.COOKIES, cookies)

    def headers(self, *headers: str) -> "TakeOptions":
        """Extra headers for the request, each in the "Name: value" form."""
        return self._add_all(Parameter.HEADERS, headers)

    def proxy(self, proxy: str) -> "TakeOptions":
        """Route the request through a custom proxy URL."""
        return self._add(Parameter.PROXY, proxy)

    def bypass_csp(self, bypass: bool) -> "TakeOptions":
        return self._add(Parameter.BYPASS_CSP, format_bool(bypass))

    def ignore_host_errors(self, ignore: bool) -> "TakeOptions":
        """Capture the page even if the site responds with an error status."""
        return self._add(Parameter.IGNORE_HOST_ERRORS, format_bool(ignore))

    # Waiting

    def delay(self, delay: int) -> "TakeOptions":
        """Delay in seconds before the capture."""
        return self._add(Parameter.DELAY, format_int(delay))

    def timeout(self, timeout: int) -> "TakeOptions":
        """Maximum rendering time in seconds."""
        return self._add(Parameter.TIMEOUT, format_int(timeout))

    def navigation_timeout(self, timeout: int) -> "TakeOptions":
        return self._add(Parameter.NAVIGATION_TIMEOUT, format_int(timeout))

    def wait_until(self, *events: str) -> "TakeOptions":
        """
        Navigation events to wait for.

        One or more of "load", "domcontentloaded", "networkidle0", "networkidle2".
        """
        return self._add_all(Parameter.WAIT_UNTIL, events)

    def wait_for_selector(self, selector: str) -> "TakeOptions":
        return self._add(Parameter.WAIT_FOR_SELECTOR, selector)

    # DOM interaction

    def click(self, selector: str) -> "TakeOptions":
        """Click the element matching the selector before capturing."""
        return self._add(Parameter.CLICK, selector)

    def error_on_click_selector_not_found(self, error: bool) -> "TakeOptions":
        return self._add(Parameter.ERROR_ON_CLICK_SELECTOR_NOT_FOUND, format_bool(error))

    def hide_selectors(self, *selectors: str) -> "TakeOptions":
        """Hide every element matching one of the selectors."""
        return self._add_all(Parameter.HIDE_SELECTORS, selectors)

    def styles(self, styles: str) -> "TakeOptions":
        """Inject custom CSS into the page."""
        return self._add(Parameter.STYLES, styles)

    def scripts(self, scripts: str) -> "TakeOptions":
        """Inject custom JavaScript into the page."""
        return self._add(Parameter.SCRIPTS, scripts)

    def scripts_wait_until(self, *events: str) -> "TakeOptions":
        return self._add_all(Parameter.SCRIPTS_WAIT_UNTIL, events)

    # Content assertions

    def fail_if_content_contains(self, *texts: str) -> "TakeOptions":
        """Fail the request if the page contains any of the texts."""
        return self._add_all(Parameter.FAIL_IF_CONTENT_CONTAINS, texts)

    def fail_if_content_missing(self, *texts: str) -> "TakeOptions":
        """Fail the request if the page does not contain one of the texts."""
        return self._add_all(Parameter.FAIL_IF_CONTENT_MISSING, texts)

    # Cloud storage

    def store(self, store: bool) -> "TakeOptions":
        """Upload the result to the configured S3-compatible storage."""
        return self._add(Parameter.STORE, format_bool(store))

    def storage_path(self, path: str) -> "TakeOptions":
        """Object key in the bucket, without the file extension."""
        return self._add(Parameter.STORAGE_PATH, path)

    def storage_endpoint(self, endpoint: str) -> "TakeOptions":
        return self._add(Parameter.STORAGE_ENDPOINT, endpoint)

    def storage_access_key_id(self, access_key_id: str) -> "TakeOptions":
        return self._add(Parameter.STORAGE_ACCESS_KEY_ID, access_key_id)

    def storage_secret_access_key(self, secret_access_key: str) -> "TakeOptions":
        return self._add(Parameter.STORAGE_SECRET_ACCESS_KEY, secret_access_key)

    def storage_bucket(self, bucket: str) -> "TakeOptions":
        return self._add(Parameter.STORAGE_BUCKET, bucket)

    def storage_class(self, storage_class: str) -> "TakeOptions":
        """Storage class of the uploaded object, e.g. "standard"."""
        return self._add(Parameter.STORAGE_CLASS, storage_class)

    def storage_acl(self, acl: str) -> "TakeOptions":
        return self._add(Parameter.STORAGE_ACL, acl)

    def storage_return_location(self, return_location: bool) -> "TakeOptions":
        return self._add(Parameter.STORAGE_RETURN_LOCATION, format_bool(return_location))

    # Async and webhooks

    def async_(self, run_async: bool) -> "TakeOptions":
        """Return immediately and render in the background (the ``async`` parameter)."""
        return self._add(Parameter.ASYNC, format_bool(run_async))

    def webhook_url(self, url: str) -> "TakeOptions":
        """URL notified once the rendering completes."""
        return self._add(Parameter.WEBHOOK_URL, url)

    def webhook_sign(self, sign: bool) -> "TakeOptions":
        return self._add(Parameter.WEBHOOK_SIGN, format_bool(sign))

    def webhook_errors(self, errors: bool) -> "TakeOptions":
        return self._add(Parameter.WEBHOOK_ERRORS, format_bool(errors))

    def external_identifier(self, identifier: str) -> "TakeOptions":
        """Caller identifier echoed back in webhook deliveries."""
        return self._add(Parameter.EXTERNAL_IDENTIFIER, identifier)

    # Metadata

    def metadata_image_size(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_IMAGE_SIZE, format_bool(extract))

    def metadata_fonts(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_FONTS, format_bool(extract))

    def metadata_open_graph(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_OPEN_GRAPH, format_bool(extract))

    def metadata_page_title(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_PAGE_TITLE, format_bool(extract))

    def metadata_content(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_CONTENT, format_bool(extract))

    def metadata_http_response_status_code(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_HTTP_RESPONSE_STATUS_CODE, format_bool(extract))

    def metadata_http_response_headers(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_HTTP_RESPONSE_HEADERS, format_bool(extract))

    def metadata_icon(self, extract: bool) -> "TakeOptions":
        return self._add(Parameter.METADATA_ICON, format_bool(extract))

    # Vision

    def vision_prompt(self, prompt: str) -> "TakeOptions":
        """Prompt sent together with the rendered image to the vision model."""
        return self._add(Parameter.VISION_PROMPT, prompt)

    def vision_max_tokens(self, max_tokens: int) -> "TakeOptions":
        return self._add(Parameter.VISION_MAX_TOKENS, format_int(max_tokens))

    def openai_api_key(self, api_key: str) -> "TakeOptions":
        """OpenAI API key used for the vision request."""
        return self._add(Parameter.OPENAI_API_KEY, api_key)

    # Rendering

    def request_gpu_rendering(self, request: bool) -> "TakeOptions":
        return self._add(Parameter.REQUEST_GPU_RENDERING, format_bool(request))
