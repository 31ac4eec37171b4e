# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Starlette responses for rendered fragments.

Example:
    Returning a fragment from a route::

        from starlette.applications import Starlette
        from starlette.routing import Route

        async def users(request):
            return html_response(html.table(USERS).column('Name', lambda u: u.name))

        app = Starlette(routes=[Route('/users', users)])
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from starlette.background import BackgroundTask
from starlette.responses import HTMLResponse

from .renderer import render_html

logger = logging.getLogger(__name__)


class FragmentResponse(HTMLResponse):
    """An HTML response whose body is a rendered builder or fragment."""

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        super().__init__(
            content=render_html(content),
            status_code=status_code,
            headers=headers,
            media_type=media_type,
            background=background,
        )


def html_response(
    renderable: Any,
    status_code: int | None = None,
    content_type: str | None = None,
) -> FragmentResponse:
    """Build a :class:`FragmentResponse`.

    Args:
        renderable: Builder or fragment to render.
        status_code: HTTP status, 200 when None.
        content_type: Media type, ``text/html`` when None.

    Raises:
        ValueError: If ``renderable`` is None.
    """
    if renderable is None:
        raise ValueError("renderable must not be None")
    status = 200 if status_code is None else status_code
    logger.debug("HTML response with status %d", status)
    return FragmentResponse(renderable, status_code=status, media_type=content_type)


def template_response(
    template: Callable[[Any], Any],
    model: Any,
    status_code: int | None = None,
    content_type: str | None = None,
) -> FragmentResponse:
    """Build a :class:`FragmentResponse` from ``template(model)``.

    Raises:
        ValueError: If ``model`` is None.
    """
    if model is None:
        raise ValueError("model must not be None")
    return html_response(template(model), status_code, content_type)
