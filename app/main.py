"""
Streamlit Frontend for Finance Onboarding

Hosts the onboarding wizard as a sequence of pages. All flow logic
lives in the wizard; this module only renders the current page and
forwards user actions.

DESIGN PRINCIPLES:
1. One page at a time, with a progress header
2. Next is disabled until the page is valid
3. Everything shown is localized in the language the user picked
4. Nothing is lost on rerun: the wizard lives in session state
"""

import streamlit as st

from onboarding.config import get_settings, validate_all_settings
from onboarding.errors import WizardError
from onboarding.models.survey import SurveyResult
from onboarding.orchestrator import OnboardingWizard, create_wizard
from onboarding.services.storage import (
    JsonFilePreferenceStore,
    StorageError,
    load_survey_result,
    save_survey_result,
)
from onboarding.wizard import PageKind


# Page configuration
st.set_page_config(
    page_title="Finance Onboarding",
    page_icon="👋",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
        margin-top: 10px;
    }
    .success-box {
        padding: 20px;
        background-color: #d4edda;
        border-radius: 10px;
        border-left: 5px solid #28a745;
        margin: 10px 0;
    }
    .greeting {
        font-size: 1.3em;
        color: #2c3e50;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_preference_store() -> JsonFilePreferenceStore:
    """Get the preference store shared by all sessions (cached)."""
    return JsonFilePreferenceStore(get_settings().wizard.preferences_path)


def handle_completion(result: SurveyResult) -> None:
    """Persist the survey result; failures are shown, not raised."""
    try:
        save_survey_result(get_preference_store(), result)
    except StorageError as e:
        st.session_state.save_error = str(e)


def get_wizard() -> OnboardingWizard:
    """Get or create this browser session's wizard."""
    if "wizard" not in st.session_state:
        st.session_state.wizard = create_wizard(
            on_complete=handle_completion,
            preferences=get_preference_store(),
        )
        st.session_state.save_error = None
    return st.session_state.wizard


def main():
    """Main application entry point."""
    status = validate_all_settings()
    if not status.get("wizard", False):
        st.error(f"❌ Configuration error: {status.get('wizard_error')}")
        st.stop()

    wizard = get_wizard()

    if wizard.is_finished:
        render_completed_page(wizard)
        return

    render_header(wizard)

    page = wizard.current_page()
    if page.kind == PageKind.LANGUAGE:
        render_language_page(wizard)
    elif page.kind == PageKind.NAME:
        render_name_page(wizard)
    elif page.kind == PageKind.CURRENCY:
        render_currency_page(wizard)
    else:
        render_question_page(wizard)

    render_navigation(wizard)


def render_header(wizard: OnboardingWizard):
    """Progress bar, counter, title and subtitle of the current page."""
    st.progress(wizard.progress_fraction())
    st.caption(wizard.progress_label())

    st.title(wizard.page_title())
    subtitle = wizard.page_subtitle()
    if subtitle:
        st.markdown(subtitle)


def render_language_page(wizard: OnboardingWizard):
    languages = wizard.language_options()
    selected = wizard.state.selected_language

    for language in languages:
        is_selected = selected is not None and selected.code == language.code
        label = f"✅ {language.display_name}" if is_selected else language.display_name
        if st.button(label, key=f"language_{language.code}"):
            wizard.select_language(language.code)
            st.rerun()


def render_name_page(wizard: OnboardingWizard):
    name = st.text_input(
        wizard.resolver.resolve(wizard.language_code, "onboarding.name.title"),
        value=wizard.state.user_name,
        placeholder=wizard.resolver.resolve(wizard.language_code, "onboarding.name.placeholder"),
        label_visibility="collapsed",
    )
    if name != wizard.state.user_name:
        wizard.set_user_name(name)

    greeting = wizard.greeting()
    if greeting:
        st.markdown(f'<p class="greeting">{greeting}</p>', unsafe_allow_html=True)


def render_currency_page(wizard: OnboardingWizard):
    options = wizard.currency_options()
    codes = [option.code for option in options]
    labels = {option.code: option.label for option in options}
    current = wizard.state.selected_currency

    code = st.radio(
        wizard.page_title(),
        options=codes,
        index=codes.index(current) if current in codes else 0,
        format_func=lambda c: labels[c],
        label_visibility="collapsed",
    )
    if code != current:
        wizard.select_currency(code)
        st.rerun()

    st.caption(wizard.format_amount("1234.56"))


def render_question_page(wizard: OnboardingWizard):
    question = wizard.current_question()
    answered = wizard.state.answers.get(question.id)

    for option_id in question.options:
        label = wizard.option_label(question.id, option_id)
        if option_id == answered:
            label = f"✅ {label}"
        if st.button(label, key=f"option_{question.id}_{option_id}"):
            wizard.answer(question.id, option_id)
            st.rerun()


def render_navigation(wizard: OnboardingWizard):
    """Back and Next / Get Started buttons."""
    st.markdown("---")
    col1, col2 = st.columns(2)

    with col1:
        if wizard.can_go_back():
            if st.button(f"← {wizard.back_button_label()}"):
                wizard.back()
                st.rerun()

    with col2:
        if st.button(
            wizard.next_button_label(),
            type="primary",
            disabled=not wizard.is_next_enabled(),
        ):
            try:
                wizard.next()
            except WizardError as e:
                st.error(f"Error: {str(e)}")
            else:
                st.rerun()


def render_completed_page(wizard: OnboardingWizard):
    """Summary shown after the survey result was emitted."""
    result = wizard.result
    greeting = wizard.greeting() or ""

    st.markdown(f"""
    <div class="success-box">
        <h3>✅ {greeting}</h3>
        <p><strong>Language:</strong> {result.language_code}</p>
        <p><strong>Currency:</strong> {result.currency_code} ({wizard.format_amount("1234.56")})</p>
    </div>
    """, unsafe_allow_html=True)

    if st.session_state.get("save_error"):
        st.warning(f"⚠️ Could not save your answers: {st.session_state.save_error}")

    with st.expander("🔍 Stored survey response"):
        try:
            stored = load_survey_result(get_preference_store())
        except StorageError as e:
            st.error(f"Error: {str(e)}")
        else:
            if stored is not None:
                st.json(stored.model_dump(mode="json", by_alias=True))

    if st.button("🔄 Start Over"):
        del st.session_state.wizard
        st.rerun()


if __name__ == "__main__":
    main()
