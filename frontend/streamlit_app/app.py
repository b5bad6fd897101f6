import os, requests, streamlit as st

from data_agent.presentation.chart_spec import build_chart_spec, to_figure
from data_agent.presentation.export import export_filename, export_json
from data_agent.presentation.table import (
    SortState, columns_of, format_cell, page_window, paginate, sort_records, toggle_sort,
)
from data_agent.core.errors import QueryFailure
from data_agent.services.remote import ask
from data_agent.state import (
    SessionState, SubmitFailed, SubmitFinished, SubmitStarted, ToggleDarkMode, reduce,
)

API = os.getenv("API_URL", "http://localhost:8000/api/v1")
EXAMPLES_FALLBACK = ["Show me customer retention rates by region"]

st.set_page_config(page_title="AI Data Agent", page_icon="📊", layout="wide")

if "agent" not in st.session_state:
    st.session_state.agent = SessionState()
    st.session_state.sort = SortState()
    st.session_state.page = 1
    st.session_state.show_sql = False

def dispatch(action):
    st.session_state.agent = reduce(st.session_state.agent, action)

def submit(question: str):
    question = question.strip()
    if not question or st.session_state.agent.loading:
        return
    dispatch(SubmitStarted(question))
    st.session_state.last_error = ""
    try:
        dispatch(SubmitFinished(ask(API, question)))
    except QueryFailure as e:
        st.session_state.last_error = str(e)
        dispatch(SubmitFailed(question))
    st.session_state.sort = SortState()
    st.session_state.page = 1

def submit_form():
    with st.spinner("Analyzing..."):
        submit(st.session_state.question)

@st.cache_data(show_spinner=False)
def load_examples():
    try:
        r = requests.get(f"{API}/examples", timeout=5)
        r.raise_for_status()
        return r.json()
    except (requests.RequestException, ValueError):
        return EXAMPLES_FALLBACK

state: SessionState = st.session_state.agent

# --- Header ---
head, toggle = st.columns([6, 1])
head.title("AI Data Agent")
head.caption("Ask a business question in plain English.")
toggle.button("☀️ Light" if state.dark_mode else "🌙 Dark", on_click=dispatch, args=(ToggleDarkMode(),))

# --- Input ---
with st.sidebar:
    st.subheader("Recent Queries")
    if not state.history:
        st.caption("No queries yet.")
    for i, past in enumerate(state.history):
        st.button(past, key=f"hist-{i}", on_click=submit, args=(past,),
                  disabled=state.loading, use_container_width=True)

with st.form("ask"):
    st.text_area("Ask a complex analytical question...", key="question", height=90)
    st.form_submit_button("Ask", type="primary", disabled=state.loading, on_click=submit_form)

st.caption("Try asking:")
cols = st.columns(2)
for i, example in enumerate(load_examples()):
    cols[i % 2].button(example, key=f"ex-{i}", on_click=submit, args=(example,),
                       disabled=state.loading, use_container_width=True)

# --- Results ---
state = st.session_state.agent
result = state.result
if result is not None:
    st.markdown("---")
    top, sql_btn, export_btn = st.columns([6, 1, 1])
    top.subheader("Results")
    if sql_btn.button("SQL"):
        st.session_state.show_sql = not st.session_state.show_sql
    export_btn.download_button(
        "Export", data=export_json(result), file_name=export_filename(), mime="application/json",
    )
    if st.session_state.show_sql and result.sql:
        st.caption("Generated SQL:")
        st.code(result.sql, language="sql")

    st.caption(f"Query: {result.query}")
    if result.error:
        st.error(result.answer)
        if st.session_state.get("last_error"):
            st.caption(st.session_state.last_error)
    else:
        st.markdown(result.answer)

    if not result.error and result.data:
        st.markdown("#### Data Visualization")
        spec = build_chart_spec(result.data, result.chart_type, state.dark_mode)
        if result.chart_type and spec is not None:
            st.caption(f"{result.chart_type.capitalize()} Chart")
            st.plotly_chart(to_figure(spec), use_container_width=True)

        # Table with sort + pagination
        columns = columns_of(result.data)
        sort: SortState = st.session_state.sort
        header = st.columns(len(columns))
        for col, name in zip(header, columns):
            arrow = "" if sort.field != name else (" ▲" if sort.direction == "asc" else " ▼")
            if col.button(f"{name}{arrow}", key=f"sort-{name}"):
                st.session_state.sort = toggle_sort(sort, name)
                st.rerun()
        rows = sort_records(result.data, sort.field, sort.direction)
        page = paginate(rows, st.session_state.page)
        st.table([{c: format_cell(r.get(c)) for c in columns} for r in page.rows])

        if page.total_pages > 1:
            st.caption(f"Showing {page.start} to {page.end} of {page.total} results")
            nav = st.columns(page.total_pages if page.total_pages <= 5 else 5)
            for col, num in zip(nav, page_window(page.page, page.total_pages)):
                if col.button(str(num), key=f"page-{num}", disabled=num == page.page):
                    st.session_state.page = num
                    st.rerun()
    elif not result.error:
        st.info("No data available for visualization")
