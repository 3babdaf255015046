"""
TaxIQ — Design System
Shared CSS, rupee formatting and backend helpers for the Streamlit calculator.
"""
import os
import httpx

BACKEND_URL = os.getenv("TAXIQ_BACKEND_URL", "http://localhost:8000")

# ── Indian Rupee formatter ──────────────────────────────
def inr(x: float) -> str:
    """Whole rupees with Indian digit grouping: 1234567 -> ₹12,34,567."""
    try:
        n = int(round(float(x)))
    except Exception:
        return f"₹{x}"
    s = str(abs(n))
    if len(s) <= 3:
        out = s
    else:
        out = s[-3:]
        s = s[:-3]
        while s:
            out = s[-2:] + "," + out
            s = s[:-2]
    return ("-₹" if n < 0 else "₹") + out


def fmt_inr(n):
    """Compact INR formatter for chart labels."""
    if n >= 1e7:  return f"₹{n/1e7:.1f}Cr"
    if n >= 1e5:  return f"₹{n/1e5:.1f}L"
    return f"₹{n:,.0f}"


def pct(rate: float) -> str:
    return f"{rate * 100:g}%"


# ── API helpers ─────────────────────────────────────────
def api_get(path: str, params=None, timeout: int = 30):
    with httpx.Client(timeout=timeout) as c:
        return c.get(f"{BACKEND_URL}{path}", params=params)


def api_post(path: str, json_body=None, timeout: int = 30):
    with httpx.Client(timeout=timeout) as c:
        return c.post(f"{BACKEND_URL}{path}", json=json_body)


# ── Master CSS ──────────────────────────────────────────
TAXIQ_CSS = """
<style>
:root {
    --bg-primary:   #0A1628;
    --bg-card:      #0D1F3C;
    --border:       #1E3A5F;
    --accent:       #FF9933;
    --green:        #00B894;
    --text:         #F8F9FA;
    --text-muted:   #8899AA;
    --radius:       12px;
}

.stApp,
section.main,
div[data-testid="stAppViewContainer"] {
    background-color: var(--bg-primary) !important;
    color: var(--text);
}

.page-title {
    font-size: 2rem;
    font-weight: 800;
    color: var(--accent);
    margin-bottom: 0.2rem;
}
.page-subtitle {
    color: var(--text-muted);
    margin-bottom: 1.2rem;
}

.tax-card {
    background: var(--bg-card);
    border: 1px solid var(--border);
    border-radius: var(--radius);
    padding: 1rem 1.2rem;
    margin-bottom: 0.8rem;
}
.tax-card.best { border-color: var(--green); }
.tax-card h4 { margin: 0 0 0.6rem 0; color: var(--text); }
.tax-row {
    display: flex;
    justify-content: space-between;
    padding: 0.15rem 0;
    color: var(--text-muted);
}
.tax-row.total {
    font-weight: 700;
    color: var(--text);
    border-top: 1px solid var(--border);
    margin-top: 0.4rem;
    padding-top: 0.5rem;
}
</style>
"""


def inject_css():
    """Inject the TaxIQ CSS into the current Streamlit page."""
    import streamlit as st
    st.markdown(TAXIQ_CSS, unsafe_allow_html=True)


def tax_card_html(label: str, result: dict, best: bool = False) -> str:
    rows = [
        ("Base Tax", result["baseTax"]),
        ("Surcharge", result["surcharge"]),
        ("Health & Education Cess", result["cess"]),
    ]
    body = "".join(f'<div class="tax-row"><span>{name}:</span><span>{inr(v)}</span></div>' for name, v in rows)
    total = f'<div class="tax-row total"><span>Total Tax Liability:</span><span>{inr(result["total"])}</span></div>'
    cls = "tax-card best" if best else "tax-card"
    return f'<div class="{cls}"><h4>{label}</h4>{body}{total}</div>'


# ── Chart theme defaults ────────────────────────────────
CHART_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor="#0A1628",
    plot_bgcolor="#0D1F3C",
    font_color="#F8F9FA",
    font=dict(family="Inter, sans-serif"),
    margin=dict(l=20, r=20, t=20, b=20),
)

COLORS = {
    "accent":  "#FF9933",
    "green":   "#00B894",
    "red":     "#D63031",
    "yellow":  "#FDCB6E",
    "blue":    "#74B9FF",
}
