"""Clipboard collaborators for the copy buttons."""

import json
from typing import Protocol


class Clipboard(Protocol):
    """Writes text to the user's clipboard. May raise on failure."""

    async def write_text(self, text: str) -> None: ...


class InMemoryClipboard:
    """Clipboard kept in process memory (CLI runs and tests)."""

    def __init__(self):
        self.text: str | None = None

    async def write_text(self, text: str) -> None:
        self.text = text


COPY_SCRIPT = """
<script>
  const text = {payload};
  const fallback = () => {{
    const doc = window.parent.document;
    const el = doc.createElement('textarea');
    el.value = text;
    el.setAttribute('readonly', '');
    el.style.position = 'fixed';
    el.style.opacity = '0';
    doc.body.appendChild(el);
    el.select();
    doc.execCommand('copy');
    doc.body.removeChild(el);
  }};
  const clip = window.parent.navigator.clipboard;
  if (clip && clip.writeText) {{
    clip.writeText(text).catch((err) => {{
      console.error('Failed to copy text: ', err);
      fallback();
    }});
  }} else {{
    fallback();
  }}
</script>
"""


def copy_script(text: str) -> str:
    """Build the browser snippet that copies text."""
    # "</" inside the JSON literal would close the script tag early
    payload = json.dumps(text).replace("</", "<\\/")
    return COPY_SCRIPT.format(payload=payload)


class StreamlitClipboard:
    """Clipboard of the browser running the Streamlit page.

    Copy actions run in button callbacks, before the page is rendered, so
    write_text only queues the text. flush() emits it as a zero-height
    component during rendering.

    The browser's answer never reaches the server: write_text succeeds as
    soon as the text is queued, so the controller shows "Copied!" even if
    the browser later refuses the write. A refusal is only logged in the
    browser console.
    """

    def __init__(self):
        self.pending: str | None = None

    async def write_text(self, text: str) -> None:
        self.pending = text

    def flush(self) -> None:
        """Render the queued write, if any."""
        if self.pending is None:
            return

        import streamlit.components.v1 as components

        text, self.pending = self.pending, None
        components.html(copy_script(text), height=0)
