"""
Sidebar / root layout HTML rendering.

Functional Core - pure projections from loaded data and navigation
state to HTML strings. No I/O.
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence

from contacts_app.components.contacts import ContactValidationError
from contacts_app.components.search import (
    IDLE,
    LinkState,
    NavigationState,
    SearchViewState,
    derive_view_state,
)
from contacts_app.domain.entities import Contact

DEFAULT_TITLE = "Contacts"

# Client half of the sidebar. The search form submits on every change,
# replacing the history entry unless the rendered page had no query.
# pageshow resets the field and indicators to what was rendered, including
# on pages restored from history.
SEARCH_SCRIPT = """
(function () {
  var form = document.getElementById("search-form");
  if (!form) { return; }
  var input = document.getElementById("query");
  var spinner = document.getElementById("search-spinner");
  var detail = document.getElementById("detail");
  var links = document.querySelectorAll("#sidebar nav a");

  function resync() {
    input.value = input.defaultValue;
    input.classList.remove("loading");
    spinner.hidden = true;
    detail.classList.remove("loading");
    links.forEach(function (link) { link.classList.remove("pending"); });
  }
  window.addEventListener("pageshow", resync);

  if (input.autofocus) {
    var end = input.value.length;
    input.focus();
    input.setSelectionRange(end, end);
  }

  form.addEventListener("input", function () {
    var params = new URLSearchParams(new FormData(form));
    var url = form.getAttribute("action") + "?" + params.toString();
    input.classList.add("loading");
    spinner.hidden = false;
    detail.classList.add("loading");
    if (form.dataset.replace === "true") {
      window.location.replace(url);
    } else {
      window.location.assign(url);
    }
  });

  links.forEach(function (link) {
    link.addEventListener("click", function (event) {
      if (event.button !== 0 || event.metaKey || event.ctrlKey || event.shiftKey || event.altKey) {
        return;
      }
      if (!link.classList.contains("active")) {
        link.classList.add("pending");
      }
    });
  });
})();
"""


def _e(text: str | None) -> str:
    return html.escape(text or "", quote=True)


def contact_path(contact_id: str) -> str:
    return f"/contacts/{contact_id}"


def _matches(path: str, target: str) -> bool:
    return path == target or path.startswith(target.rstrip("/") + "/")


def link_state(
    to: str,
    current_path: str,
    navigation: NavigationState = IDLE,
) -> LinkState:
    """active if the current route is under to, pending if it is the in-flight target."""
    if _matches(current_path, to):
        return "active"
    if (
        navigation.state == "loading"
        and navigation.location is not None
        and _matches(navigation.location.pathname, to)
    ):
        return "pending"
    return ""


def render_contact_label(contact: Contact) -> str:
    name = contact.display_name
    label = _e(name) if name else "<i>No Name</i>"
    if contact.favorite:
        label += " <span>★</span>"
    return label


def render_contact_list(
    contacts: Sequence[Contact],
    current_path: str = "/",
    navigation: NavigationState = IDLE,
) -> str:
    if not contacts:
        return "<p><i>No contacts</i></p>"

    items = []
    for contact in contacts:
        to = contact_path(contact.id)
        state = link_state(to, current_path, navigation)
        items.append(
            f'<li><a href="{_e(to)}" class="{state}">{render_contact_label(contact)}</a></li>'
        )
    return "<ul>\n" + "\n".join(items) + "\n</ul>"


def render_search_form(view: SearchViewState, param: str = "query") -> str:
    """
    Search form with the input value bound to the resolved query.

    data-replace carries the push/replace decision for the next change.
    """
    input_class = "loading" if view.search_loading else ""
    spinner_hidden = "" if view.search_loading else " hidden"
    replace = "true" if view.replace_on_change else "false"
    autofocus = "" if view.query is None else " autofocus"
    return f"""<form id="search-form" role="search" method="get" action="/" data-replace="{replace}">
  <input id="query" aria-label="Search contacts" class="{input_class}" value="{_e(view.field_value)}" placeholder="Search" type="search" name="{_e(param)}" autocomplete="off"{autofocus} />
  <div id="search-spinner" aria-hidden="true"{spinner_hidden}></div>
</form>"""


def render_new_form() -> str:
    return """<form method="post" action="/">
  <button type="submit">New</button>
</form>"""


def render_root_layout(
    contacts: Sequence[Contact],
    query: str | None,
    outlet: str = "",
    current_path: str = "/",
    navigation: NavigationState = IDLE,
    title: str = DEFAULT_TITLE,
    param: str = "query",
) -> str:
    view = derive_view_state(query, navigation, param)
    detail_class = "loading" if view.detail_loading else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{_e(title)}</title>
</head>
<body>
<div id="sidebar">
  <h1>{_e(title)}</h1>
  <div>
{render_search_form(view, param)}
{render_new_form()}
  </div>
  <nav>
{render_contact_list(contacts, current_path, navigation)}
  </nav>
</div>
<div id="detail" class="{detail_class}">
{outlet}
</div>
<script>{SEARCH_SCRIPT}</script>
</body>
</html>"""


# --- Outlet views ---


def render_index() -> str:
    return """<p id="index-page">
  This is a demo contacts app.
  <br />
  Pick a contact on the left or create a new one.
</p>"""


def render_contact_detail(contact: Contact) -> str:
    name = _e(contact.display_name) if contact.display_name else "<i>No Name</i>"
    favorite_value = "false" if contact.favorite else "true"
    favorite_label = "Remove from favorites" if contact.favorite else "Add to favorites"
    star = "★" if contact.favorite else "☆"

    parts = ['<div id="contact">']
    if contact.avatar:
        parts.append(
            f'  <div><img alt="{_e(contact.display_name)}" src="{_e(contact.avatar)}" /></div>'
        )
    parts.append("  <div>")
    parts.append(
        f"""    <h1>{name}
      <form method="post" action="{_e(contact_path(contact.id))}/favorite">
        <button aria-label="{favorite_label}" name="favorite" value="{favorite_value}">{star}</button>
      </form>
    </h1>"""
    )
    if contact.twitter:
        handle = contact.twitter.lstrip("@")
        parts.append(
            f'    <p><a href="https://twitter.com/{_e(handle)}">{_e(contact.twitter)}</a></p>'
        )
    if contact.notes:
        parts.append(f"    <p>{_e(contact.notes)}</p>")
    parts.append(
        f"""    <div>
      <form method="get" action="{_e(contact_path(contact.id))}/edit">
        <button type="submit">Edit</button>
      </form>
      <form method="post" action="{_e(contact_path(contact.id))}/destroy"
            onsubmit="return confirm('Please confirm you want to delete this record.');">
        <button type="submit">Delete</button>
      </form>
    </div>"""
    )
    parts.append("  </div>")
    parts.append("</div>")
    return "\n".join(parts)


def render_errors(errors: Iterable[ContactValidationError]) -> str:
    items = [f'<li data-field="{_e(err.field)}">{_e(err.message)}</li>' for err in errors]
    if not items:
        return ""
    return '<ul class="errors">\n' + "\n".join(items) + "\n</ul>"


def render_contact_form(
    contact: Contact,
    errors: Sequence[ContactValidationError] = (),
) -> str:
    return f"""<form id="contact-form" method="post" action="{_e(contact_path(contact.id))}/edit">
  {render_errors(errors)}
  <p>
    <span>Name</span>
    <input aria-label="First name" name="first" placeholder="First" type="text" value="{_e(contact.first)}" />
    <input aria-label="Last name" name="last" placeholder="Last" type="text" value="{_e(contact.last)}" />
  </p>
  <label><span>Twitter</span>
    <input name="twitter" placeholder="@jack" type="text" value="{_e(contact.twitter)}" />
  </label>
  <label><span>Avatar URL</span>
    <input aria-label="Avatar URL" name="avatar" placeholder="https://example.com/avatar.jpg" type="text" value="{_e(contact.avatar)}" />
  </label>
  <label><span>Notes</span>
    <textarea name="notes" rows="6">{_e(contact.notes)}</textarea>
  </label>
  <p>
    <button type="submit">Save</button>
    <a href="{_e(contact_path(contact.id))}">Cancel</a>
  </p>
</form>"""


def render_error_page(message: str, status_code: int = 500, title: str = DEFAULT_TITLE) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <title>{_e(title)} - Error</title>
</head>
<body>
<div id="error-page">
  <h1>Oops!</h1>
  <p>Sorry, an unexpected error has occurred.</p>
  <p><i>{status_code}: {_e(message)}</i></p>
</div>
</body>
</html>"""
