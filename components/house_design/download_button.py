"""
Download button for a generated design image.
"""

import mesop as me


@me.web_component(path="./download_button.js")
def download_button(
    *,
    image_url: str,
    filename: str,
    label: str = "Download",
    key: str | None = None,
):
    """Saves `image_url` in the browser as `filename` when clicked."""
    return me.insert_web_component(
        key=key,
        name="design-download-button",
        properties={
            "href": image_url,
            "filename": filename,
            "label": label,
        },
    )
