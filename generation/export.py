"""
Plain-text downloads of generated content.
"""
from django.http import HttpResponse
from django.utils.http import content_disposition_header


def improved_filename(filename: str) -> str:
    """
    Name of the download for a generated rewrite of ``filename``.

    Everything after the first dot is dropped: "jane.doe.pdf" becomes
    "jane-improved.txt". An empty base falls back to "resume".
    """
    base_name = (filename or '').split('.')[0] or 'resume'
    return f"{base_name}-improved.txt"


def text_attachment(content: str, filename: str) -> HttpResponse:
    """
    Build a text/plain attachment response for generated content.

    Quotes are escaped, and names outside printable ASCII (including line
    breaks) are sent percent-encoded as ``filename*``.
    """
    response = HttpResponse(content, content_type='text/plain; charset=utf-8')
    response['Content-Disposition'] = content_disposition_header(
        as_attachment=True,
        filename=improved_filename(filename),
    )
    return response
