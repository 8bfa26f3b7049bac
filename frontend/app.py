import streamlit as st
import pandas as pd

from quarter_ratio import DistributedRatioFactory, DistributionValidator
from quarter_ratio.analysis import QuarterAnalyzer
from quarter_ratio.utils import configure_logging

# ---- CONFIG ----
st.set_page_config(
    page_title="Quarter Distribution",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)

configure_logging()

INITIAL_QUARTERS = [
    {"value": 10},
    {"value": 20},
    {"value": 20},
    {"value": 20},
    {"value": 20},
    {"value": 10},
]

# ---- CUSTOM CSS ----
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)


# ---- HELPER FUNCTIONS ----
@st.cache_resource
def get_service():
    """One shared DistributedRatio, it holds no per-call state"""
    return DistributedRatioFactory()


def init_state(service):
    """Seed the quarters and set the total to their sum"""
    if "quarters" not in st.session_state:
        st.session_state.quarters = [dict(q) for q in INITIAL_QUARTERS]
        st.session_state.previous_quarters = st.session_state.quarters
        st.session_state.total = service.total_of(st.session_state.quarters)


def on_total_change():
    """Distribute the new total across the current quarters"""
    service = get_service()
    total = st.session_state.total_input
    total = int(total) if float(total).is_integer() else total
    st.session_state.previous_quarters = st.session_state.quarters
    st.session_state.quarters = service.distribute(total, st.session_state.quarters)
    st.session_state.total = total


def reset_quarters():
    for key in ("quarters", "previous_quarters", "total", "total_input"):
        st.session_state.pop(key, None)


# ---- MAIN APP ----
service = get_service()
init_state(service)

st.markdown('<div class="main-header">📊 Quarter Distribution</div>', unsafe_allow_html=True)
st.markdown('<div class="sub-header">Change the total and watch it spread across the quarters</div>', unsafe_allow_html=True)

# ============ SIDEBAR ============
st.sidebar.title("📋 Settings")
config = service.config
st.sidebar.metric("Quarters", config.number_of_qtrs)
st.sidebar.markdown(f"**Remainder strategy:** `{config.remainder_strategy}`")
st.sidebar.markdown("**Default ratios:**")
st.sidebar.dataframe(
    pd.DataFrame({"quarter": [f"Q{i + 1}" for i in range(config.number_of_qtrs)],
                  "ratio": list(config.qtr_defaults)}),
    hide_index=True
)
st.sidebar.button("Reset quarters", on_click=reset_quarters)

# ============ TOTAL ============
st.number_input(
    "Total",
    min_value=0,
    value=int(st.session_state.total),
    step=1,
    key="total_input",
    on_change=on_total_change,
    help="Every change redistributes the total across the quarters"
)

quarters = st.session_state.quarters
frame = QuarterAnalyzer.to_frame(st.session_state.previous_quarters, quarters, config.qtr_val_key)

col1, col2 = st.columns([2, 3])

with col1:
    st.subheader("🧮 Quarters")
    st.dataframe(frame, hide_index=True, use_container_width=True)

with col2:
    st.subheader("📈 Values")
    st.bar_chart(frame.set_index("quarter")[["after"]])

issues = DistributionValidator(config).validate(st.session_state.total, quarters)
if issues:
    st.markdown("### ⚠️ Validation Issues")
    for issue in issues:
        st.warning(issue)
else:
    st.success(f"✅ Quarters add up to {st.session_state.total}")
