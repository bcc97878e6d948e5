import pytest


def test_subscribe(client):
    response = client.post("/api/subscribe", json={"email": "reader@blogmail.org"})
    assert response.status_code == 200
    assert response.json() == {"message": "Successfully subscribed to newsletter"}


@pytest.mark.parametrize("email", ["not-an-email", "", "reader@", "@blogmail.org"])
def test_subscribe_rejects_malformed_email(client, email):
    response = client.post("/api/subscribe", json={"email": email})
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid email address"}


def test_subscribe_requires_email(client):
    response = client.post("/api/subscribe", json={})
    assert response.status_code == 400
    assert response.json() == {"detail": "email: Field required"}


def contact_form(**overrides):
    form = {
        "name": "Alex Chen",
        "email": "alex@blogmail.org",
        "subject": "Guest post idea",
        "message": "I would love to write about minimalist kitchens.",
    }
    form.update(overrides)
    return form


def test_contact(client):
    response = client.post("/api/contact", json=contact_form())
    assert response.status_code == 200
    assert response.json() == {"message": "Thank you for reaching out. We'll get back to you soon."}


@pytest.mark.parametrize(
    "field, value, detail",
    [
        ("name", "A", "Name must be at least 2 characters"),
        ("email", "alex", "Please enter a valid email address"),
        ("subject", "Hi", "Subject must be at least 5 characters"),
        ("message", "Too short", "Message must be at least 10 characters"),
    ],
)
def test_contact_validation(client, field, value, detail):
    response = client.post("/api/contact", json=contact_form(**{field: value}))
    assert response.status_code == 400
    assert response.json() == {"detail": detail}
