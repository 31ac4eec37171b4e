# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Starlette responses."""

import pytest
from starlette.applications import Starlette
from starlette.routing import Route
from starlette.testclient import TestClient

from genro_fragments import FragmentResponse, html, html_response, template_response


class TestHtmlResponse:
    """Tests for html_response and template_response."""

    def test_defaults(self):
        """Test status, body and content type."""
        response = html_response(html.h1('Hi'))
        assert isinstance(response, FragmentResponse)
        assert response.status_code == 200
        assert response.body == b'<h1>Hi</h1>'
        assert response.headers['content-type'] == 'text/html; charset=utf-8'

    def test_status_code(self):
        """Test a custom status."""
        assert html_response(html.p('Missing'), status_code=404).status_code == 404

    def test_content_type(self):
        """Test a custom media type."""
        response = html_response(html.p('x'), content_type='application/xhtml+xml')
        assert response.headers['content-type'].startswith('application/xhtml+xml')

    def test_none_rejected(self):
        """Test a None renderable is refused."""
        with pytest.raises(ValueError):
            html_response(None)

    def test_template_response(self):
        """Test a template applied to a model."""
        response = template_response(lambda name: html.p(f"Hello {name}"), 'Ann')
        assert response.body == b'<p>Hello Ann</p>'

    def test_template_response_requires_model(self):
        """Test a None model is refused."""
        with pytest.raises(ValueError):
            template_response(lambda m: html.p('x'), None)


class TestStarletteRoute:
    """Tests for fragments served from a Starlette app."""

    def test_route(self):
        """Test a table rendered through a route."""
        users = [{'name': 'Ann'}, {'name': 'Bob'}]

        async def endpoint(request):
            table = html.table(users).column('Name', lambda u: u['name'])
            return html_response(table)

        client = TestClient(Starlette(routes=[Route('/users', endpoint)]))
        response = client.get('/users')
        assert response.status_code == 200
        assert response.text == (
            '<table><thead><tr><th>Name</th></tr></thead>'
            '<tbody><tr><td>Ann</td></tr><tr><td>Bob</td></tr></tbody></table>'
        )
