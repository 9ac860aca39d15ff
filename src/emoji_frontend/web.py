from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from emoji_backend.engine import Engine
from emoji_backend.normalize import clean_query
from . import rows_to_dicts

app = Flask(__name__)
# the host's state value lives on the app, not in a module global
app.config["PICKER_ENGINE"] = None


def _engine() -> Engine:
    eng = app.config.get("PICKER_ENGINE")
    if eng is None:
        raise RuntimeError("No engine attached. Set app.config['PICKER_ENGINE'] or run main().")
    return eng


# ---------- API ----------
@app.get("/api/rows")
def api_rows():
    q = request.args.get("q", "", type=str)
    result, rows, generation = _engine().search(q)
    return jsonify({
        "query": result.query,
        "count": len(result),
        "generation": generation,
        "rows": rows_to_dicts(rows),
    })


@app.post("/api/activate")
def api_activate():
    body = request.get_json(silent=True) or {}
    try:
        row = int(body["row"])
        col = int(body["col"])
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "row and col must be integers"}), 400
    q = body.get("q")
    if q is not None and not isinstance(q, str):
        return jsonify({"error": "q must be a string"}), 400

    # resolve against the installed result; a click never re-filters
    eng = _engine()
    if q is not None and clean_query(q) != eng.current().query:
        return jsonify({"error": "result was replaced, search again"}), 409
    glyph = eng.activate(row, col, query=q)
    if glyph is None:
        return jsonify({"error": "no entry at that slot"}), 404
    return jsonify({"glyph": glyph, "generation": eng.generation})


@app.get("/api/health")
def api_health():
    return jsonify({"ok": True, "corpus": len(_engine().corpus)})


# ---------- UI ----------
@app.get("/")
def home():
    # Single page: search box + 5-wide grid, copy on click. No external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Emoji Picker • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
  --tile:#0b1117;
}
*{box-sizing:border-box}
html,body{height:100%}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:420px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
.input input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:var(--tile); color:var(--ink); outline:none; font-size:16px;
}
.input input:focus{ border-color:var(--accent) }
.meta{ display:flex; justify-content:space-between; color:var(--muted); font-size:13px; margin:6px 0 10px 0; }
.grid{ max-height:60vh; overflow-y:auto; }
.row{ display:grid; grid-template-columns:repeat(5,1fr); gap:2px; margin-bottom:2px; }
.tile{
  height:46px; font-size:30px; display:flex; align-items:center; justify-content:center;
  background:var(--tile); border:1px solid transparent; border-radius:6px; cursor:pointer;
}
.tile:hover{ border-color:#fff }
.tile:active{ background:#1f3b4d }
.tile.pad{ visibility:hidden; cursor:default }
.empty{ padding:24px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Emoji Picker</h1>
      <div class="input">
        <input id="q" type="text" placeholder="Search emoji's" autocomplete="off" autofocus />
      </div>
      <div class="meta">
        <div id="stats">Ready.</div>
        <div id="copied"></div>
      </div>
      <div id="out" class="grid"></div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), stats = $("#stats"), copied = $("#copied");
let t;

function render(data){
  stats.textContent = `Matches: ${data.count}`;
  if(data.rows.length === 0){
    out.innerHTML = '<div class="empty">No matches.</div>';
    return;
  }
  out.innerHTML = "";
  data.rows.forEach((row, r)=>{
    const div = document.createElement("div");
    div.className = "row";
    row.forEach((slot, c)=>{
      const tile = document.createElement("div");
      tile.className = slot.placeholder ? "tile pad" : "tile";
      tile.textContent = slot.glyph;
      if(!slot.placeholder){
        tile.title = slot.description;
        tile.addEventListener("click", async ()=>{
          try{ await copySlot(data.query, r, c); }
          catch(e){ copied.textContent = "Clipboard unavailable"; }
        });
      }
      div.appendChild(tile);
    });
    out.appendChild(div);
  });
}

async function copySlot(query, row, col){
  const resp = await fetch("/api/activate", {
    method: "POST", headers: {"Content-Type": "application/json"},
    body: JSON.stringify({q: query, row: row, col: col}),
  });
  if(resp.status === 409){ copied.textContent = "Results changed"; await search(); return; }
  if(!resp.ok) return;
  const hit = await resp.json();
  await navigator.clipboard.writeText(hit.glyph);
  copied.textContent = `Copied ${hit.glyph}`;
}

async function search(){
  const resp = await fetch(`/api/rows?q=${encodeURIComponent(q.value)}`);
  render(await resp.json());
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(search, 120); });
window.addEventListener("keydown", (ev)=>{
  if(ev.key === "Escape"){ q.value = ""; search(); }
});
search();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--corpus", default=None, help="Corpus file (description<TAB>glyph); bundled data if omitted")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    eng = Engine()
    eng.build(args.corpus, verbose=args.verbose)
    app.config["PICKER_ENGINE"] = eng
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        eng.shutdown()
        app.config["PICKER_ENGINE"] = None
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
