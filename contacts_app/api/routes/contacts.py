"""
Contact routes rendered inside the root layout's detail pane.

Every page re-runs the root loader against the current URL so the
sidebar stays in sync with any query string carried along.
"""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from contacts_app.api.deps import get_contact_service, get_rules
from contacts_app.api.schemas import ContactResponse
from contacts_app.app_shell.root import root_loader
from contacts_app.components.contacts import (
    ContactService,
    DeleteContactInput,
    GetContactInput,
    SetFavoriteInput,
    UpdateContactInput,
    run_delete,
    run_get,
    run_set_favorite,
    run_update,
)
from contacts_app.components.sidebar import (
    contact_path,
    render_contact_detail,
    render_contact_form,
    render_root_layout,
)
from contacts_app.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


def _page(
    request: Request,
    outlet: str,
    service: ContactService,
    rules: Rules,
    status_code: int = 200,
) -> HTMLResponse:
    data = root_loader(str(request.url), service, rules.search.param)
    html = render_root_layout(
        data.contacts,
        data.query,
        outlet=outlet,
        current_path=request.url.path,
        title=rules.project.title,
        param=rules.search.param,
    )
    return HTMLResponse(content=html, status_code=status_code)


@router.get("/contacts/{contact_id}", response_class=HTMLResponse)
def contact_detail(
    contact_id: str,
    request: Request,
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    contact = run_get(GetContactInput(contact_id=contact_id), service).contact
    return _page(request, render_contact_detail(contact), service, rules)


@router.get("/contacts/{contact_id}/edit", response_class=HTMLResponse)
def contact_edit_form(
    contact_id: str,
    request: Request,
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    contact = run_get(GetContactInput(contact_id=contact_id), service).contact
    return _page(request, render_contact_form(contact), service, rules)


@router.post("/contacts/{contact_id}/edit", response_model=None)
def contact_update(
    contact_id: str,
    request: Request,
    first: str = Form(""),
    last: str = Form(""),
    twitter: str = Form(""),
    avatar: str = Form(""),
    notes: str = Form(""),
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse | RedirectResponse:
    input_data = UpdateContactInput(
        contact_id=contact_id,
        first=first,
        last=last,
        twitter=twitter,
        avatar=avatar,
        notes=notes,
    )
    result = run_update(input_data, service)

    if not result.success:
        logger.info("Rejected edit of %s: %s", contact_id, [e.code for e in result.errors])
        current = run_get(GetContactInput(contact_id=contact_id), service).contact
        # Re-show what was submitted next to the errors
        submitted = current.model_copy(
            update={"first": first, "last": last, "twitter": twitter, "avatar": avatar, "notes": notes}
        )
        return _page(
            request,
            render_contact_form(submitted, result.errors),
            service,
            rules,
            status_code=400,
        )

    return RedirectResponse(
        url=contact_path(contact_id), status_code=rules.navigation.redirect_status
    )


@router.post("/contacts/{contact_id}/destroy")
def contact_destroy(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> RedirectResponse:
    run_delete(DeleteContactInput(contact_id=contact_id), service)
    return RedirectResponse(url="/", status_code=rules.navigation.redirect_status)


@router.post("/contacts/{contact_id}/favorite")
def contact_favorite(
    contact_id: str,
    favorite: str = Form("false"),
    service: ContactService = Depends(get_contact_service),
    rules: Rules = Depends(get_rules),
) -> RedirectResponse:
    run_set_favorite(
        SetFavoriteInput(contact_id=contact_id, favorite=favorite == "true"), service
    )
    return RedirectResponse(
        url=contact_path(contact_id), status_code=rules.navigation.redirect_status
    )


# --- JSON ---


@router.get("/api/contacts/{contact_id}", response_model=ContactResponse)
def contact_json(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    contact = run_get(GetContactInput(contact_id=contact_id), service).contact
    return ContactResponse.from_contact(contact)
