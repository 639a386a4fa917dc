"""Single page dashboard served at the root URL."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index():
    return INDEX_HTML


# ---------------------------------------------------------------------------
# Inline HTML
# ---------------------------------------------------------------------------

INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>GrowthProAI</title>
<style>
  *, *::before, *::after { margin: 0; padding: 0; box-sizing: border-box; }

  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    background: linear-gradient(135deg, #0f172a, #3b0764 50%, #0f172a);
    color: #f1f5f9;
    min-height: 100vh;
    padding: 32px 16px;
  }

  .wrap { max-width: 1040px; margin: 0 auto; }

  header { text-align: center; margin-bottom: 40px; }

  h1 {
    font-size: 44px;
    font-weight: 800;
    background: linear-gradient(90deg, #fff, #e9d5ff, #fbcfe8);
    -webkit-background-clip: text;
    background-clip: text;
    color: transparent;
  }

  .badge {
    display: inline-block;
    margin-top: 8px;
    padding: 2px 10px;
    border: 1px solid rgba(168,85,247,0.4);
    border-radius: 999px;
    background: rgba(168,85,247,0.15);
    color: #e9d5ff;
    font-size: 12px;
  }

  .tagline { margin-top: 14px; font-size: 18px; color: #cbd5e1; }
  .subtitle { margin-top: 4px; font-size: 14px; color: #94a3b8; }

  .stats {
    display: grid;
    grid-template-columns: repeat(4, 1fr);
    gap: 16px;
    margin-bottom: 40px;
  }

  .stat {
    background: rgba(255,255,255,0.05);
    border: 1px solid rgba(255,255,255,0.1);
    border-radius: 12px;
    padding: 16px;
    text-align: center;
  }

  .stat .value { font-size: 24px; font-weight: 700; }
  .stat .label { font-size: 13px; color: #94a3b8; }

  .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 32px; }

  .card {
    background: rgba(255,255,255,0.08);
    border: 1px solid rgba(255,255,255,0.18);
    border-radius: 16px;
    padding: 28px;
  }

  .card h2 { font-size: 18px; margin-bottom: 4px; }
  .card .hint { font-size: 13px; color: #94a3b8; margin-bottom: 20px; }

  label {
    display: block;
    font-size: 13px;
    font-weight: 600;
    color: #e2e8f0;
    margin: 16px 0 6px;
  }

  input[type="text"] {
    width: 100%;
    padding: 12px 14px;
    border: 1px solid rgba(255,255,255,0.2);
    border-radius: 10px;
    background: rgba(255,255,255,0.06);
    color: #f8fafc;
    font-size: 15px;
    outline: none;
  }

  input[type="text"].invalid { border-color: #f87171; }

  .field-error { margin-top: 6px; font-size: 13px; color: #fca5a5; min-height: 16px; }

  .actions { display: flex; gap: 10px; margin-top: 24px; }

  button {
    padding: 12px 22px;
    background: linear-gradient(90deg, #7c3aed, #db2777);
    color: white;
    border: none;
    border-radius: 10px;
    font-size: 15px;
    font-weight: 600;
    cursor: pointer;
  }

  button.secondary { background: rgba(255,255,255,0.12); }
  button:disabled { opacity: 0.5; cursor: not-allowed; }

  .empty { color: #94a3b8; font-size: 14px; text-align: center; padding: 48px 0; }

  .metrics { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; margin-bottom: 20px; }

  .metric {
    background: rgba(255,255,255,0.06);
    border-radius: 12px;
    padding: 16px;
    text-align: center;
  }

  .metric .value { font-size: 30px; font-weight: 800; }
  .metric .label { font-size: 12px; color: #94a3b8; }
  .stars { color: #facc15; letter-spacing: 2px; }

  .headline {
    background: rgba(124,58,237,0.18);
    border: 1px solid rgba(168,85,247,0.35);
    border-radius: 12px;
    padding: 18px;
    font-size: 17px;
    font-weight: 600;
    line-height: 1.4;
  }

  .footer { margin-top: 40px; text-align: center; font-size: 12px; color: #64748b; }

  @media (max-width: 800px) {
    .grid, .stats { grid-template-columns: 1fr; }
  }
</style>
</head>
<body>
<div class="wrap">
  <header>
    <h1>GrowthProAI</h1>
    <div class="badge">Professional Dashboard</div>
    <p class="tagline">AI-Powered Business Intelligence Platform</p>
    <p class="subtitle">Transform your local business with analytics, AI-generated content, and actionable insights</p>
  </header>

  <div class="stats">
    <div class="stat"><div class="value">10K+</div><div class="label">Active Users</div></div>
    <div class="stat"><div class="value">150%</div><div class="label">Growth Rate</div></div>
    <div class="stat"><div class="value">500+</div><div class="label">Cities</div></div>
    <div class="stat"><div class="value">98%</div><div class="label">Success Rate</div></div>
  </div>

  <div class="grid">
    <div class="card">
      <h2>Business Analysis Setup</h2>
      <p class="hint">Enter your business details to unlock powerful insights</p>

      <form id="form" novalidate>
        <label for="name">Business Name</label>
        <input type="text" id="name" name="name" placeholder="e.g., Cake &amp; Co">
        <div class="field-error" id="name-error"></div>

        <label for="location">Location</label>
        <input type="text" id="location" name="location" placeholder="e.g., Mumbai">
        <div class="field-error" id="location-error"></div>

        <div class="actions">
          <button type="submit" id="analyze">Analyze Business</button>
          <button type="button" class="secondary" id="reset">New Analysis</button>
        </div>
      </form>
    </div>

    <div class="card">
      <h2>Business Intelligence Report</h2>
      <p class="hint">Simulated Google Business insights and SEO content</p>

      <div class="empty" id="empty">Run an analysis to see your report.</div>

      <div id="result" style="display:none">
        <div class="metrics">
          <div class="metric">
            <div class="value" id="rating"></div>
            <div class="stars" id="stars"></div>
            <div class="label">Google Rating</div>
          </div>
          <div class="metric">
            <div class="value" id="reviews"></div>
            <div class="label">Customer Reviews</div>
          </div>
        </div>
        <div class="headline" id="headline"></div>
        <div class="actions">
          <button type="button" id="regenerate">Regenerate SEO Headline</button>
        </div>
      </div>
    </div>
  </div>

  <div class="footer">GrowthProAI &middot; simulated data for demonstration purposes</div>
</div>

<script>
const form = document.getElementById('form');
const nameInput = document.getElementById('name');
const locationInput = document.getElementById('location');
const analyzeBtn = document.getElementById('analyze');
const regenerateBtn = document.getElementById('regenerate');
const resetBtn = document.getElementById('reset');

let report = null;
let isLoading = false;
let isRegenerating = false;

function setFieldError(field, message) {
  document.getElementById(field + '-error').textContent = message || '';
  document.getElementById(field).classList.toggle('invalid', Boolean(message));
}

function validate() {
  const errors = {};
  if (!nameInput.value.trim()) errors.name = 'Business name is required';
  if (!locationInput.value.trim()) errors.location = 'Location is required';
  setFieldError('name', errors.name);
  setFieldError('location', errors.location);
  return Object.keys(errors).length === 0;
}

function render() {
  document.getElementById('empty').style.display = report ? 'none' : 'block';
  document.getElementById('result').style.display = report ? 'block' : 'none';
  if (report) {
    document.getElementById('rating').textContent = report.rating.toFixed(1);
    document.getElementById('stars').textContent = '\\u2605'.repeat(Math.round(report.rating));
    document.getElementById('reviews').textContent = report.reviews.toLocaleString();
    document.getElementById('headline').textContent = report.headline;
  }
  analyzeBtn.disabled = isLoading;
  analyzeBtn.textContent = isLoading ? 'Analyzing...' : 'Analyze Business';
  regenerateBtn.disabled = isRegenerating;
  regenerateBtn.textContent = isRegenerating ? 'Generating...' : 'Regenerate SEO Headline';
}

form.addEventListener('submit', async (e) => {
  e.preventDefault();
  if (isLoading || !validate()) return;

  isLoading = true;
  render();
  try {
    const response = await fetch('/api/business-data', {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({ name: nameInput.value, location: locationInput.value }),
    });
    if (!response.ok) throw new Error('Failed to fetch business data');
    report = await response.json();
  } catch (err) {
    console.error('Error fetching business data:', err);
    alert('Failed to fetch business data. Please try again.');
  } finally {
    isLoading = false;
    render();
  }
});

regenerateBtn.addEventListener('click', async () => {
  if (!report || isRegenerating) return;

  isRegenerating = true;
  render();
  try {
    const params = new URLSearchParams({ name: nameInput.value, location: locationInput.value });
    const response = await fetch('/api/regenerate-headline?' + params.toString());
    if (!response.ok) throw new Error('Failed to regenerate headline');
    const data = await response.json();
    if (report) report = { ...report, headline: data.headline };
  } catch (err) {
    console.error('Error regenerating headline:', err);
    alert('Failed to regenerate headline. Please try again.');
  } finally {
    isRegenerating = false;
    render();
  }
});

resetBtn.addEventListener('click', () => {
  nameInput.value = '';
  locationInput.value = '';
  report = null;
  setFieldError('name', '');
  setFieldError('location', '');
  render();
});

render();
</script>
</body>
</html>
"""
