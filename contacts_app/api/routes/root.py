"""
Root layout routes.

GET / renders the sidebar for the query in the URL; POST / creates an
empty contact and redirects to its edit page. GET /api/root returns the
same loader payload as JSON.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from contacts_app.api.deps import get_contact_service, get_rules
from contacts_app.api.schemas import ContactResponse, RootDataResponse
from contacts_app.app_shell.root import root_action, root_loader
from contacts_app.components.contacts import ContactService
from contacts_app.components.sidebar import render_index, render_root_layout
from contacts_app.rules.models import Rules

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def root_page(
    request: Request,
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    """Sidebar with the index placeholder in the detail pane."""
    data = root_loader(str(request.url), service, rules.search.param)
    html = render_root_layout(
        data.contacts,
        data.query,
        outlet=render_index(),
        current_path=request.url.path,
        title=rules.project.title,
        param=rules.search.param,
    )
    return HTMLResponse(content=html, status_code=200)


@router.post("/")
def root_create(
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> RedirectResponse:
    """Create an empty contact. Any submitted fields are ignored."""
    location = root_action(service, rules.navigation.edit_path)
    return RedirectResponse(url=location, status_code=rules.navigation.redirect_status)


@router.get("/api/root", response_model=RootDataResponse)
def root_data(
    request: Request,
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> RootDataResponse:
    data = root_loader(str(request.url), service, rules.search.param)
    return RootDataResponse(
        contacts=[ContactResponse.from_contact(c) for c in data.contacts],
        query=data.query,
    )
