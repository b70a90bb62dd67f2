"""
FastAPI sample app demonstrating Connect sharing and Doc Scan sessions.

Endpoints:
- GET /                  index page with the static scenario
- GET /dynamic-share     share URL for a dynamic scenario
- GET /profile           callback receiving the share token
- GET /docscan           creates a Doc Scan session and embeds its iframe
- GET /docscan/success   session results
- GET /docscan/media     proxies media content
"""

from __future__ import annotations

import sys
from pathlib import Path

import requests
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from yoti_client import (
    Client,
    DocScanService,
    DynamicPolicyBuilder,
    DynamicScenarioBuilder,
    LocationConstraintExtensionBuilder,
    RequestedDocumentAuthenticityCheckBuilder,
    RequestedFaceMatchCheckBuilder,
    RequestedLivenessCheckBuilder,
    RequestedTextExtractionTaskBuilder,
    SdkConfigBuilder,
    SessionSpecificationBuilder,
    WantedAttributeBuilder,
    YotiError,
    constants,
)
from yoti_client.crypto import read_pem_file
from yoti_client.media import Media
from yoti_client.profile import Profile

from .settings import AppSettings

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# (label, icon) per attribute name; anything else falls back to its own name
_ATTRIBUTE_LABELS = {
    constants.ATTR_FAMILY_NAME: ("Family names", "yoti-icon-profile"),
    constants.ATTR_GIVEN_NAMES: ("Given names", "yoti-icon-profile"),
    constants.ATTR_DATE_OF_BIRTH: ("Date of birth", "yoti-icon-calendar"),
    constants.ATTR_GENDER: ("Gender", "yoti-icon-gender"),
    constants.ATTR_NATIONALITY: ("Nationality", "yoti-icon-profile"),
    constants.ATTR_PHONE_NUMBER: ("Mobile number", "yoti-icon-phone"),
    constants.ATTR_EMAIL_ADDRESS: ("Email address", "yoti-icon-email"),
    constants.ATTR_POSTAL_ADDRESS: ("Address", "yoti-icon-address"),
    constants.ATTR_DOCUMENT_DETAILS: ("Document Details", "yoti-icon-profile"),
    constants.ATTR_STRUCTURED_POSTAL_ADDRESS: ("Structured Address", "yoti-icon-address"),
    constants.ATTR_DOCUMENT_IMAGES: ("Document Images", "yoti-icon-profile"),
}


def build_view_attributes(profile: Profile) -> list[dict]:
    """Attribute rows for the profile page."""
    attributes = []
    for attribute in profile.get_attributes_list():
        # derived attributes and the selfie/full name are rendered separately
        if ":" in attribute.name or attribute.name in (constants.ATTR_SELFIE, constants.ATTR_FULL_NAME):
            continue
        name, icon = _ATTRIBUTE_LABELS.get(
            attribute.name, (attribute.name.replace("_", " "), "yoti-icon-profile")
        )
        attributes.append({"name": name, "icon": icon, "prop": attribute})

    for verification in profile.get_age_verifications():
        attributes.append({
            "name": "Age Verification",
            "icon": "yoti-icon-verified",
            "prop": verification.get_attribute(),
            "age_verification": verification,
        })
    return attributes


def save_selfie(profile: Profile, static_dir: Path) -> Path | None:
    selfie = profile.selfie
    if selfie is None or not isinstance(selfie.value, Media):
        return None
    static_dir.mkdir(parents=True, exist_ok=True)
    path = static_dir / "YotiSelfie.jpeg"
    path.write_bytes(selfie.value.get_content())
    return path


def build_dynamic_scenario():
    location = (
        LocationConstraintExtensionBuilder()
        .with_latitude(51.5074)
        .with_longitude(-0.1278)
        .with_radius(6000)
        .build()
    )
    given_names = WantedAttributeBuilder().with_name(constants.ATTR_GIVEN_NAMES).build()
    policy = (
        DynamicPolicyBuilder()
        .with_wanted_attribute(given_names)
        .with_wanted_attribute_by_name(constants.ATTR_EMAIL_ADDRESS)
        .with_full_name()
        .with_selfie()
        .with_phone_number()
        .with_age_over(18)
        .build()
    )
    return (
        DynamicScenarioBuilder()
        .with_callback_endpoint("/profile")
        .with_policy(policy)
        .with_extension(location)
        .build()
    )


def build_session_spec(base_url: str):
    sdk_config = (
        SdkConfigBuilder()
        .with_allows_camera_and_upload()
        .with_primary_colour("#2d9fff")
        .with_locale("en-GB")
        .with_success_url(f"{base_url}docscan/success")
        .with_error_url(f"{base_url}docscan/error")
        .build()
    )
    return (
        SessionSpecificationBuilder()
        .with_client_session_token_ttl(600)
        .with_resources_ttl(90000)
        .with_user_tracking_id("some-user-tracking-id")
        .with_requested_check(RequestedDocumentAuthenticityCheckBuilder().build())
        .with_requested_check(RequestedLivenessCheckBuilder().for_zoom_liveness().with_max_retries(3).build())
        .with_requested_check(RequestedFaceMatchCheckBuilder().with_manual_check_fallback().build())
        .with_requested_task(RequestedTextExtractionTaskBuilder().with_manual_check_fallback().build())
        .with_sdk_config(sdk_config)
        .build()
    )


def create_app(
    settings: AppSettings | None = None,
    *,
    client: Client | None = None,
    doc_scan: DocScanService | None = None,
) -> FastAPI:
    """Build the app; clients are created from settings unless injected."""
    settings = settings or AppSettings()
    if client is None or doc_scan is None:
        if settings.key_file_path is None:
            raise ValueError("YOTI_KEY_FILE_PATH must be set")
        pem = read_pem_file(settings.key_file_path)
        client = client or Client(settings.client_sdk_id, pem)
        doc_scan = doc_scan or DocScanService(settings.client_sdk_id, pem)

    app = FastAPI(title="Yoti client example", version="1.0.0")
    app.state.settings = settings
    app.state.client = client
    app.state.doc_scan = doc_scan

    settings.static_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")
    templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))

    def render_error(request: Request, error) -> HTMLResponse:
        return templates.TemplateResponse(request, "error.html", {"error": str(error)})

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        return templates.TemplateResponse(request, "index.html", {
            "yoti_client_sdk_id": settings.client_sdk_id,
            "yoti_scenario_id": settings.scenario_id,
        })

    @app.get("/dynamic-share", response_class=HTMLResponse)
    def dynamic_share(request: Request):
        try:
            share = request.app.state.client.create_share_url(build_dynamic_scenario())
        except (YotiError, requests.RequestException) as exc:
            print(exc, file=sys.stderr)
            return render_error(request, exc)
        return templates.TemplateResponse(request, "dynamic_share.html", {
            "yoti_client_sdk_id": settings.client_sdk_id,
            "yoti_share_url": share.share_url,
        })

    @app.get("/profile", response_class=HTMLResponse)
    def profile(request: Request, token: str | None = None):
        if not token:
            return render_error(request, "No token has been provided.")
        try:
            details = request.app.state.client.get_activity_details(token)
        except (YotiError, requests.RequestException) as exc:
            print(exc, file=sys.stderr)
            return render_error(request, exc)

        user_profile = details.get_profile()
        save_selfie(user_profile, settings.static_dir)
        return templates.TemplateResponse(request, "profile.html", {
            "remember_me_id": details.remember_me_id,
            "parent_remember_me_id": details.parent_remember_me_id,
            "selfie_uri": details.get_base64_selfie_uri(),
            "profile": user_profile,
            "attributes": build_view_attributes(user_profile),
        })

    @app.get("/docscan", response_class=HTMLResponse)
    def docscan(request: Request):
        service: DocScanService = request.app.state.doc_scan
        try:
            session = service.create_session(build_session_spec(str(request.base_url)))
        except (YotiError, requests.RequestException) as exc:
            print(exc, file=sys.stderr)
            return render_error(request, exc)
        iframe_url = (
            f"{service.api_url}/web/index.html"
            f"?sessionID={session.session_id}&sessionToken={session.client_session_token}"
        )
        return templates.TemplateResponse(request, "docscan.html", {
            "session_id": session.session_id,
            "iframe_url": iframe_url,
        })

    @app.get("/docscan/success", response_class=HTMLResponse)
    def docscan_success(request: Request, sessionId: str):
        try:
            session = request.app.state.doc_scan.get_session(sessionId)
        except (YotiError, requests.RequestException) as exc:
            print(exc, file=sys.stderr)
            return render_error(request, exc)
        return templates.TemplateResponse(request, "docscan_success.html", {"session": session})

    @app.get("/docscan/error", response_class=HTMLResponse)
    def docscan_error(request: Request, yotiErrorCode: str | None = None):
        return render_error(request, f"Doc Scan session failed: {yotiErrorCode or 'unknown error'}")

    @app.get("/docscan/media")
    def docscan_media(sessionId: str, mediaId: str, request: Request):
        try:
            media = request.app.state.doc_scan.get_media_content(sessionId, mediaId)
        except (YotiError, requests.RequestException) as exc:
            print(exc, file=sys.stderr)
            return render_error(request, exc)
        return Response(content=media.get_content(), media_type=media.get_mime_type())

    return app


def run() -> None:
    """
    Run the sample app over HTTPS:

        python -m examples.profile_app.app
    """
    import uvicorn

    settings = AppSettings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        ssl_keyfile=str(settings.ssl_keyfile) if settings.ssl_keyfile else None,
        ssl_certfile=str(settings.ssl_certfile) if settings.ssl_certfile else None,
    )


if __name__ == "__main__":
    run()
