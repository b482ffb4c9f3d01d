"""Subscription list page with filters, sorting and the add/edit form."""

from __future__ import annotations

from datetime import date
from html import escape
from typing import Any

import streamlit as st

from analytics import (
    FILTER_ACTIVE,
    FILTER_ALL,
    FILTER_INACTIVE,
    SORT_KEYS,
    build_subscription_frame,
    filter_subscriptions,
    list_categories,
    sort_subscriptions,
)
from app.layout import card
from app.state import EDITING_KEY, queue_toast
from config import Settings
from core import (
    BillingCycle,
    Subscription,
    SubscriptionCategory,
    SubscriptionNotFoundError,
    SubscriptionStore,
    SubscriptionValidationError,
    validate_subscription,
)
from core.formatting import CURRENCY_SYMBOLS, cycle_suffix, format_billing_date, format_currency, monogram
from visualization import theme_tokens

TOKENS = theme_tokens()


def _logo_markup(subscription: Subscription) -> str:
    background = subscription.color or TOKENS.category_color(subscription.category)
    if subscription.logo:
        inner = f"<img src='{escape(subscription.logo)}' alt='{escape(subscription.name)}' />"
    else:
        inner = escape(monogram(subscription.name))
    return f"<div class='st-sub__logo' style='background:{background}'>{inner}</div>"


def _render_subscription_row(subscription: Subscription, store: SubscriptionStore) -> None:
    info_col, edit_col, delete_col = st.columns((6, 1, 1))
    css_class = "st-sub" if subscription.active else "st-sub is-inactive"
    amount_label = format_currency(subscription.amount, subscription.currency) + cycle_suffix(subscription.cycle)
    info_col.markdown(
        f"<div class='{css_class}'>{_logo_markup(subscription)}<div>"
        f"<strong>{escape(subscription.name)}</strong> · {amount_label}<br />"
        f"<span class='st-sub__meta'>{escape(subscription.category)} · next payment "
        f"{format_billing_date(subscription.next_billing_date)}"
        f"{'' if subscription.active else ' · inactive'}</span></div></div>",
        unsafe_allow_html=True,
    )
    if edit_col.button("Edit", key=f"edit-{subscription.id}"):
        st.session_state[EDITING_KEY] = subscription.id
        st.rerun()
    if delete_col.button("Delete", key=f"delete-{subscription.id}"):
        try:
            removed = store.remove(subscription.id)
        except SubscriptionNotFoundError as exc:
            st.error(str(exc))
        else:
            queue_toast(f"{removed.name} has been removed from your subscriptions.", icon="🗑️")
            st.rerun()


def _filter_options(store: SubscriptionStore) -> list[str]:
    return [FILTER_ALL, FILTER_ACTIVE, FILTER_INACTIVE, *list_categories(store.list())]


def _render_list(store: SubscriptionStore) -> None:
    options = _filter_options(store)
    filter_col, sort_col = st.columns((3, 1))
    selected_filter = filter_col.radio(
        "Filter",
        options,
        horizontal=True,
        key="list_filter",
        format_func=lambda value: value.title() if value in (FILTER_ALL, FILTER_ACTIVE, FILTER_INACTIVE) else value,
        label_visibility="collapsed",
    )
    sort_key = sort_col.selectbox(
        "Sort",
        list(SORT_KEYS),
        key="list_sort",
        format_func=SORT_KEYS.get,
        label_visibility="collapsed",
    )

    visible = sort_subscriptions(filter_subscriptions(store.list(), selected_filter or FILTER_ALL), sort_key)
    if not visible:
        st.info(
            "No subscriptions match your current filters. "
            "Try changing your filter criteria or add a new subscription."
        )
        return

    if st.toggle("Table view", key="list_table_view"):
        st.dataframe(
            build_subscription_frame(visible),
            hide_index=True,
            use_container_width=True,
            column_config={
                "Amount": st.column_config.NumberColumn(format="%.2f"),
                "MonthlyEquivalent": st.column_config.NumberColumn("Monthly", format="%.2f"),
                "NextBillingDate": st.column_config.DateColumn("Next payment", format="MMM D"),
            },
        )
        return

    for subscription in visible:
        _render_subscription_row(subscription, store)


def _form_defaults(initial: Subscription | None, settings: Settings) -> dict[str, Any]:
    if initial is None:
        today = date.today()
        return {
            "name": "",
            "url": "",
            "amount": 0.0,
            "currency": settings.default_currency,
            "cycle": BillingCycle.MONTHLY,
            "category": SubscriptionCategory.ENTERTAINMENT.value,
            "start_date": today,
            "next_billing_date": today,
            "color": TOKENS.subscription_palette[0],
            "logo": "",
            "description": "",
            "active": True,
        }
    return {
        "name": initial.name,
        "url": initial.url or "",
        "amount": float(initial.amount),
        "currency": initial.currency,
        "cycle": BillingCycle(initial.cycle),
        "category": initial.category,
        "start_date": initial.start_date,
        "next_billing_date": initial.next_billing_date,
        "color": initial.color or TOKENS.subscription_palette[0],
        "logo": initial.logo or "",
        "description": initial.description or "",
        "active": initial.active,
    }


def _indexed(options: list[Any], value: Any) -> tuple[list[Any], int]:
    if value not in options:
        options = [*options, value]
    return options, options.index(value)


def _render_form(store: SubscriptionStore, settings: Settings, editing: Subscription | None) -> None:
    defaults = _form_defaults(editing, settings)
    currencies, currency_index = _indexed(list(CURRENCY_SYMBOLS), defaults["currency"])
    cycles = list(BillingCycle)
    categories, category_index = _indexed(
        [category.value for category in SubscriptionCategory], defaults["category"]
    )
    form_key = f"subscription-form-{editing.id if editing else 'new'}"

    with st.form(form_key, clear_on_submit=editing is None):
        left, right = st.columns(2)
        name = left.text_input("Name *", value=defaults["name"], placeholder="Netflix, Spotify, etc.")
        url = right.text_input("Website URL", value=defaults["url"], placeholder="https://example.com")
        amount = left.number_input("Amount *", min_value=0.0, step=0.01, value=defaults["amount"])
        currency = right.selectbox("Currency", currencies, index=currency_index)
        cycle = left.selectbox(
            "Billing Cycle *",
            cycles,
            index=cycles.index(defaults["cycle"]),
            format_func=lambda value: value.value.title(),
        )
        category = right.selectbox("Category *", categories, index=category_index)
        start_date = left.date_input("Start Date", value=defaults["start_date"])
        next_billing_date = right.date_input("Next Billing Date *", value=defaults["next_billing_date"])
        color = left.color_picker("Color", value=defaults["color"])
        logo = right.text_input("Logo URL", value=defaults["logo"])
        description = st.text_area("Description", value=defaults["description"])
        active = st.checkbox("Active subscription", value=defaults["active"])

        submit_label = "Update Subscription" if editing else "Add Subscription"
        submit_col, cancel_col = st.columns((1, 1))
        submitted = submit_col.form_submit_button(submit_label, type="primary")
        cancelled = cancel_col.form_submit_button("Cancel")

    if cancelled:
        st.session_state.pop(EDITING_KEY, None)
        st.rerun()
    if not submitted:
        return

    raw = {
        "name": name,
        "url": url,
        "amount": amount,
        "currency": currency,
        "cycle": cycle,
        "category": category,
        "start_date": start_date,
        "next_billing_date": next_billing_date,
        "color": color,
        "logo": logo,
        "description": description,
        "active": active,
    }
    try:
        draft = validate_subscription(raw)
        if editing is None:
            saved = store.add(draft)
            queue_toast(f"{saved.name} has been added to your subscriptions.", icon="✅")
        else:
            saved = store.update(editing.id, draft)
            queue_toast(f"{saved.name} has been updated.", icon="✏️")
    except SubscriptionValidationError as exc:
        for message in exc.errors:
            st.error(message)
        return
    except SubscriptionNotFoundError as exc:
        st.error(str(exc))
        st.session_state.pop(EDITING_KEY, None)
        return

    st.session_state.pop(EDITING_KEY, None)
    st.rerun()


def _resolve_editing(store: SubscriptionStore) -> Subscription | None:
    editing_id = st.session_state.get(EDITING_KEY)
    if editing_id is None:
        return None
    try:
        return store.get(editing_id)
    except SubscriptionNotFoundError:
        st.session_state.pop(EDITING_KEY, None)
        return None


def render_page(store: SubscriptionStore, settings: Settings) -> None:
    """Render the subscription list and management page."""

    st.title("Subscriptions")
    st.caption(f"{len(store)} subscriptions tracked.")

    editing = _resolve_editing(store)
    if editing is not None:
        with card("Edit Subscription", suffix=editing.name):
            _render_form(store, settings, editing)
    else:
        with st.expander("Add Subscription"):
            _render_form(store, settings, None)

    with card("Your subscriptions", suffix="Filter & sort"):
        _render_list(store)


__all__ = ["render_page"]
