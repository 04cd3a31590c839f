"""
Tests for waitlist script injection.
"""

from bs4 import BeautifulSoup

from landingwise.rendering.waitlist import build_waitlist_script, inject_waitlist_script


def test_script_is_last_child_of_body(valid_html):
    html = inject_waitlist_script(valid_html, "project-1")

    soup = BeautifulSoup(html, "html.parser")
    scripts = soup.body.find_all("script", recursive=False)
    assert scripts
    assert scripts[-1] is soup.body.find_all(recursive=False)[-1]
    assert '"project-1"' in scripts[-1].string


def test_page_content_is_preserved(valid_html):
    html = inject_waitlist_script(valid_html, "project-1")

    assert 'data-waitlist="true"' in html
    assert "https://cdn.tailwindcss.com" in html


def test_document_without_body_gets_script_appended():
    html = inject_waitlist_script("<div><form></form></div>", "p1")

    assert html.startswith("<div><form></form></div><script>")
    assert html.endswith("</script>")


def test_script_uses_endpoint_and_project_id():
    script = build_waitlist_script("p-42", endpoint="https://example.com/join")

    assert "fetch(\"https://example.com/join\"" in script
    assert "projectId: \"p-42\"" in script
    assert "__ENDPOINT__" not in script
    assert "__PROJECT_ID__" not in script
