import os
import sys

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

sys.path.insert(0, os.path.dirname(__file__))
from theme import inject_css, inr, fmt_inr, pct, api_post, tax_card_html, CHART_LAYOUT, COLORS


st.set_page_config(
    page_title="TaxIQ | Indian Income Tax Calculator",
    page_icon="💰",
    layout="wide",
)
inject_css()

st.markdown('<div class="page-title">🧮 Indian Income Tax Calculator</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="page-subtitle">New Regime 2025-26 vs New Regime 2024-25 vs Old Regime: slabs → 87A rebate → surcharge → 4% cess</div>',
    unsafe_allow_html=True,
)

REGIME_KEYS = {
    "New Tax Regime 2025-26": "new2025",
    "New Tax Regime 2024-25": "new2024",
    "Old Tax Regime": "old",
}


def _detail(res) -> str:
    try:
        return str(res.json().get("detail", res.text))
    except ValueError:
        return res.text


with st.form("tax_form"):
    col1, col2 = st.columns([0.7, 0.3], gap="large")
    with col1:
        income_raw = st.text_input("Annual Income (₹)", placeholder="Enter your annual income, e.g. 12,00,000")
    with col2:
        age = st.number_input("Age", min_value=0, max_value=120, value=30, step=1)
    submitted = st.form_submit_button("Calculate Tax", use_container_width=True, type="primary")

if submitted:
    try:
        res = api_post("/api/tax/calculate", json_body={"income": income_raw, "age": int(age)})
        if res.status_code == 422:
            st.error(_detail(res) or "Please enter a valid income amount")
            st.session_state.pop("tax_comparison", None)
        elif res.status_code != 200:
            st.error(res.text)
        else:
            st.session_state["tax_comparison"] = res.json()
    except Exception as e:
        st.error(f"Backend not reachable or error occurred: {e}")


comparison = st.session_state.get("tax_comparison")
if not comparison:
    st.info("Enter your annual income and age, then click **Calculate Tax**.")
    st.stop()

st.info(f"Based on your income of {inr(comparison['income'])} and age {comparison['age']}")

results = comparison["results"]
best = comparison["best_regime"]

cols = st.columns(len(results), gap="large")
for col, (label, result) in zip(cols, results.items()):
    with col:
        st.markdown(tax_card_html(label, result, best=(label == best)), unsafe_allow_html=True)

if comparison["savings"] > 0:
    st.success(f"You save {inr(comparison['savings'])} with the **{best}**!")


st.divider()
st.markdown("### Total Tax by Regime")

labels = list(results.keys())
fig = go.Figure()
fig.add_trace(go.Bar(x=labels, y=[results[l]["baseTax"] for l in labels], name="Base Tax", marker_color=COLORS["blue"]))
fig.add_trace(go.Bar(x=labels, y=[results[l]["surcharge"] for l in labels], name="Surcharge", marker_color=COLORS["yellow"]))
fig.add_trace(go.Bar(x=labels, y=[results[l]["cess"] for l in labels], name="Cess", marker_color=COLORS["accent"]))
fig.update_layout(
    **CHART_LAYOUT,
    barmode="stack",
    height=360,
    legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
)
fig.update_yaxes(tickformat=",.0f")
st.plotly_chart(fig, use_container_width=True)


st.divider()
st.markdown("### Slab Breakdown")

selected = st.selectbox("Regime", labels, index=labels.index(best))
try:
    res = api_post(
        f"/api/tax/calculate/{REGIME_KEYS[selected]}",
        json_body={"income": comparison["income"], "age": comparison["age"]},
    )
except Exception as e:
    st.error(f"Backend not reachable or error occurred: {e}")
    st.stop()

if res.status_code != 200:
    st.error(_detail(res))
    st.stop()

detail = res.json()
df = pd.DataFrame(detail["breakdown"])
df["Slab"] = [
    f"{fmt_inr(lo)} +" if hi is None else f"{fmt_inr(lo)} – {fmt_inr(hi)}" for lo, hi in zip(df["min"], df["max"])
]
df["Rate"] = df["rate"].map(pct)
df["Taxable"] = df["taxable"].map(inr)
df["Tax"] = df["tax"].map(inr)
st.dataframe(df[["Slab", "Rate", "Taxable", "Tax"]], use_container_width=True, hide_index=True)

if detail["income"] <= detail["rebate_threshold"]:
    st.caption(
        f"Income is within the Section 87A limit of {inr(detail['rebate_threshold'])}: "
        f"slab tax of {inr(df['tax'].sum())} is fully rebated."
    )
