"""End-to-end tests for the OG handlers, the bot rewrite and the contact endpoint."""

import json

from troddr.core.config import settings
from tests.conftest import BOT_UA, HUMAN_UA

UUID = "0f8fad5b-d9cb-469f-a165-70867728950e"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "TRODDR Link Previews"}


def test_human_gets_static_listing_page(client, static_site, supabase):
    resp = client.get("/api/og/blue-hole", headers={"user-agent": HUMAN_UA})

    assert resp.status_code == 200
    assert "listing page" in resp.text
    assert resp.headers["content-type"].startswith("text/html")
    assert static_site.requested == ["https://troddr.com/listings.html?slug=blue-hole"]
    assert supabase.calls == []


def test_human_redirected_when_static_page_unreachable(client, static_site):
    static_site.down = True

    resp = client.get("/api/og/blue-hole", headers={"user-agent": HUMAN_UA}, follow_redirects=False)

    assert resp.status_code == 302
    assert resp.headers["location"] == "https://troddr.com/listings.html?slug=blue-hole"


def test_bot_gets_listing_preview(client, supabase):
    supabase.tables["places"] = [{
        "slug": "scotchies",
        "name": "Scotchies",
        "town": "Montego Bay",
        "parish": "St. James",
        "description": "Jerk & more",
        "image": '["https://cdn.troddr.com/scotchies.jpg"]',
    }]

    resp = client.get("/api/og/scotchies", headers={"user-agent": BOT_UA})

    assert resp.status_code == 200
    assert resp.headers["cache-control"] == "public, s-maxage=3600, stale-while-revalidate=86400"
    assert "<title>Scotchies in Montego Bay, St. James — TRODDR</title>" in resp.text
    assert '<meta property="og:image" content="https://cdn.troddr.com/scotchies.jpg" />' in resp.text
    assert '<meta name="description" content="Jerk &amp; more" />' in resp.text


def test_bot_gets_defaults_when_listing_missing(client):
    resp = client.get("/api/og/rocky-point", headers={"user-agent": "facebookexternalhit/1.1"})

    assert resp.status_code == 200
    assert "<title>Rocky Point — TRODDR</title>" in resp.text
    assert "https://troddr.com/images/og-default.jpg" in resp.text


def test_bot_gets_defaults_when_supabase_down(client, supabase):
    supabase.fail = True

    resp = client.get("/api/og/rocky-point", headers={"user-agent": BOT_UA})

    assert resp.status_code == 200
    assert "Check out Rocky Point on TRODDR!" in resp.text


def test_listing_debug_mode(client, supabase):
    supabase.tables["places"] = [{"slug": "scotchies", "name": "Scotchies", "image": "/img/s.jpg"}]

    resp = client.get("/api/og/scotchies?debug=1", headers={"user-agent": HUMAN_UA})

    data = resp.json()
    assert resp.headers["content-type"].startswith("application/json")
    assert data["found"] is True
    assert data["imageFieldType"] == "string"
    assert data["extractedImage"] == "https://troddr.com/img/s.jpg"
    assert "town" not in data


def test_guide_preview_and_static_page(client, supabase, static_site):
    supabase.tables["guides"] = [{"slug": "negril", "title": "Negril Weekend", "location": "Negril"}]

    bot = client.get("/api/og/guides/negril", headers={"user-agent": "Slackbot-LinkExpanding 1.0"})
    human = client.get("/api/og/guides/negril", headers={"user-agent": HUMAN_UA})

    assert "<title>Negril Weekend — Negril | TRODDR Guide</title>" in bot.text
    assert '<link rel="canonical" href="https://troddr.com/guides/negril" />' in bot.text
    assert "guide page" in human.text
    assert static_site.requested == ["https://troddr.com/guides.html?slug=negril"]


def test_itinerary_token_preview(client, supabase):
    supabase.rpcs["get_shared_itinerary"] = lambda params: (
        {"title": "Island Hop", "destination": "Ocho Rios", "items": [{"image": "https://cdn/x.jpg"}]}
        if params["_token"] == UUID else None
    )

    resp = client.get(f"/api/og/itinerary/{UUID.replace('-', '')}", headers={"user-agent": BOT_UA})

    assert "<title>Island Hop | TRODDR Itinerary</title>" in resp.text
    assert "I&#x27;m going to Ocho Rios with 1 stops!" in resp.text
    assert '<meta property="og:image" content="https://cdn/x.jpg" />' in resp.text


def test_itinerary_token_debug_lists_formats(client):
    resp = client.get(f"/api/og/itinerary/{UUID}?debug=1")

    data = resp.json()
    assert data["token"] == UUID
    assert data["tokenFormatsTried"] == [UUID, UUID.replace("-", "")]
    assert data["found"] is False
    assert data["itemsCount"] == 0


def test_itinerary_query_route(client, static_site):
    bot = client.get("/api/og/itinerary?destination=Negril", headers={"user-agent": BOT_UA})
    human = client.get("/api/og/itinerary?tripId=abc&destination=Negril", headers={"user-agent": HUMAN_UA})

    assert "Check out this Negril itinerary on TRODDR!" in bot.text
    assert '<link rel="canonical" href="https://troddr.com/itinerary" />' in bot.text
    assert "itinerary page" in human.text
    assert static_site.requested == ["https://troddr.com/itinerary.html?tripId=abc&destination=Negril"]


def test_middleware_rewrites_bot_requests(client, supabase):
    supabase.tables["guides"] = [{"slug": "negril", "title": "Negril Weekend"}]

    listing = client.get("/listings/rocky-point", headers={"user-agent": BOT_UA})
    guide = client.get("/guides/negril", headers={"user-agent": BOT_UA})
    human = client.get("/listings/rocky-point", headers={"user-agent": HUMAN_UA})

    assert "<title>Rocky Point — TRODDR</title>" in listing.text
    assert "Negril Weekend | TRODDR Guide" in guide.text
    assert human.status_code == 404


def test_listing_injection_for_bots_only(client, static_site, supabase):
    static_site.pages["/listings/scotchies"] = (
        "<html><head><title>TRODDR</title><script src=\"/js/main.js\"></script></head><body>app</body></html>"
    )
    supabase.tables["places"] = [{"slug": "scotchies", "name": "Scotchies"}]

    bot = client.get("/api/listing-og/scotchies", headers={"user-agent": BOT_UA})
    human = client.get("/api/listing-og/scotchies", headers={"user-agent": HUMAN_UA})
    missing = client.get("/api/listing-og/nope", headers={"user-agent": BOT_UA})

    assert "<title>Scotchies — TRODDR</title>" in bot.text
    assert "<title>TRODDR</title>" not in bot.text
    assert "<body>app</body>" in bot.text
    assert human.text == static_site.pages["/listings/scotchies"]
    assert missing.status_code == 404


def test_contact_accepts_valid_message(client):
    resp = client.post("/api/contact", json={
        "firstName": "Shelly-Ann",
        "lastName": "O'Neil",
        "email": "shelly@example.com",
        "subject": "partnership",
        "message": "We'd love to list our guesthouse.",
    })

    assert resp.status_code == 200
    assert resp.json()["status"] == "received"


def test_contact_rejects_invalid_fields(client):
    resp = client.post("/api/contact", json={
        "firstName": "R2D2",
        "lastName": "  ",
        "email": "not-an-email",
        "message": "hi",
    })

    assert resp.status_code == 422
    messages = " ".join(error["msg"] for error in resp.json()["detail"])
    assert "Please enter a valid name" in messages
    assert "This field is required" in messages
    assert "Please enter a valid email address" in messages
    assert "minimum 10 characters" in messages


def test_static_page_ignores_forged_host_header(client, static_site):
    resp = client.get("/api/og/blue-hole", headers={"user-agent": HUMAN_UA, "host": "attacker.example"})

    assert resp.status_code == 200
    assert static_site.requested == ["https://troddr.com/listings.html?slug=blue-hole"]


def test_static_origin_setting_is_used(client, static_site, monkeypatch):
    monkeypatch.setattr(settings, "STATIC_ORIGIN", "https://static.troddr.com/")

    client.get("/api/og/guides/negril", headers={"user-agent": HUMAN_UA})
    client.get("/api/listing-og/scotchies", headers={"user-agent": HUMAN_UA})

    assert static_site.requested == [
        "https://static.troddr.com/guides.html?slug=negril",
        "https://static.troddr.com/listings/scotchies",
    ]


def test_row_with_unexpected_column_types_is_still_found(client, supabase):
    supabase.tables["places"] = [{"slug": "s", "name": "Scotchies", "town": 42}]

    data = client.get("/api/og/s?debug=1").json()
    page = client.get("/api/og/s", headers={"user-agent": BOT_UA})

    assert data["found"] is True
    assert data["town"] == "42"
    assert "<title>Scotchies in 42 — TRODDR</title>" in page.text


def test_debug_payload_is_indented(client):
    resp = client.get("/api/og/itinerary/abc?debug=1")

    assert resp.text.startswith('{\n  "token": "abc"')
    assert json.loads(resp.text)["found"] is False


def test_contact_missing_fields_report_required(client):
    resp = client.post("/api/contact", json={"email": "shelly@example.com"})

    assert resp.status_code == 422
    errors = {error["loc"][-1]: error["msg"] for error in resp.json()["detail"]}
    assert set(errors) == {"firstName", "lastName", "message"}
    assert all("This field is required" in msg for msg in errors.values())
