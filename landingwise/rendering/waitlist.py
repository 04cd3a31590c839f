"""
Waitlist form handling for published landing pages.

Generated pages carry a plain email form. Before a page is served, a script
is injected that submits those forms to the waitlist endpoint.
"""

import json

from bs4 import BeautifulSoup

WAITLIST_ENDPOINT = "/api/waitlist"

WAITLIST_SCRIPT = """
  const waitlistForms = document.querySelectorAll('form[data-waitlist], form:has(input[type="email"])');

  function showToast(message, colorClass) {
    const toast = document.createElement('div');
    toast.className = 'fixed top-4 right-4 text-white px-4 py-2 rounded-md shadow-lg z-50 ' + colorClass;
    toast.textContent = message;
    document.body.appendChild(toast);
    setTimeout(() => {
      if (document.body.contains(toast)) {
        document.body.removeChild(toast);
      }
    }, 3000);
  }

  waitlistForms.forEach(form => {
    form.addEventListener('submit', async (e) => {
      e.preventDefault();

      const emailInput = form.querySelector('input[type="email"]');
      if (!emailInput) return;

      const email = emailInput.value.trim();
      if (!email) return;

      const submitBtn = form.querySelector('button[type="submit"], input[type="submit"]');
      const originalText = submitBtn ? (submitBtn.textContent || submitBtn.value) : '';
      if (submitBtn) {
        submitBtn.disabled = true;
        submitBtn.textContent = 'Joining...';
      }

      try {
        const response = await fetch(__ENDPOINT__, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ projectId: __PROJECT_ID__, email: email }),
        });
        if (!response.ok) {
          throw new Error('Failed to join waitlist');
        }
        emailInput.value = '';
        showToast('Successfully joined the waitlist!', 'bg-green-500');
      } catch (error) {
        console.error('Error:', error);
        showToast('Failed to join waitlist. Please try again.', 'bg-red-500');
      } finally {
        if (submitBtn) {
          submitBtn.disabled = false;
          submitBtn.textContent = originalText;
        }
      }
    });
  });
"""


def build_waitlist_script(project_id: str, endpoint: str = WAITLIST_ENDPOINT) -> str:
    """Script body that wires waitlist forms to the endpoint for one project."""
    return (
        WAITLIST_SCRIPT
        .replace("__ENDPOINT__", json.dumps(endpoint))
        .replace("__PROJECT_ID__", json.dumps(project_id))
    )


def inject_waitlist_script(html_content: str, project_id: str, endpoint: str = WAITLIST_ENDPOINT) -> str:
    """
    Add the waitlist submit script to a landing page.

    Args:
        html_content: Published page HTML.
        project_id: Project the collected emails belong to.
        endpoint: URL the forms post to.

    Returns:
        HTML with the script as the last child of <body>, or appended to the
        end of the document when there is no <body>.
    """
    script_body = build_waitlist_script(project_id, endpoint)

    soup = BeautifulSoup(html_content, "html.parser")
    body = soup.find("body")
    if body is None:
        return f"{html_content}<script>{script_body}</script>"

    script = soup.new_tag("script")
    script.string = script_body
    body.append(script)
    return str(soup)
