from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from orderboard.core import InvalidOrderError, OrderFactory, OrderRegistry


# --- Settings ---
DEPTH_LEVELS = int(os.environ.get("ORDERBOARD_DEPTH_LEVELS", "10"))
LOG_LEVEL = os.environ.get("ORDERBOARD_LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL)


app = FastAPI(title="Live Order Board")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Single-instrument in-memory instance ---
registry = OrderRegistry()


@app.post("/api/orders", status_code=201)
async def api_create_order(payload: Dict[str, Any] = Body(...)):
    try:
        order_id = registry.create(**OrderFactory.from_dict(payload))
    except InvalidOrderError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"id": order_id}


@app.delete("/api/orders/{order_id}", status_code=204)
async def api_cancel_order(order_id: int) -> Response:
    registry.cancel(order_id)
    return Response(status_code=204)


@app.get("/api/orders")
async def api_orders() -> List[Dict[str, Any]]:
    return [o.to_dict() for o in registry.list_all_orders()]


@app.get("/api/summaries")
async def api_summaries() -> List[Dict[str, Any]]:
    return [s.to_dict() for s in registry.live_order_summaries()]


@app.get("/api/depth")
async def api_depth(levels: int = Query(DEPTH_LEVELS, gt=0)):
    book = registry.depth(levels=levels)
    return {side: [[str(px), qty] for px, qty in rows] for side, rows in book.items()}


@app.get("/")
async def index() -> HTMLResponse:
    # Minimal frontend without build step
    html = """
<!doctype html>
<html>
  <head>
    <meta charset='utf-8' />
    <meta name='viewport' content='width=device-width, initial-scale=1' />
    <title>Live Order Board</title>
    <style>
      body { font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; margin: 0; padding: 16px; }
      .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
      .card { border: 1px solid #ddd; border-radius: 8px; padding: 12px; }
      h2 { margin: 0 0 8px; font-size: 16px; }
      table { width: 100%; border-collapse: collapse; }
      th, td { text-align: right; padding: 4px 6px; border-bottom: 1px solid #eee; }
    </style>
  </head>
  <body>
    <h1>Live Order Board</h1>
    <div class='grid'>
      <div class='card'>
        <h2>Buy</h2>
        <table><thead><tr><th>Price</th><th>Quantity</th></tr></thead>
        <tbody id='buy'></tbody></table>
      </div>
      <div class='card'>
        <h2>Sell</h2>
        <table><thead><tr><th>Price</th><th>Quantity</th></tr></thead>
        <tbody id='sell'></tbody></table>
      </div>
    </div>
    <script>
      const buyBody = document.getElementById('buy');
      const sellBody = document.getElementById('sell');

      function rows(items) {
        return items.map(s => `<tr><td>${s.price}</td><td>${s.quantity}</td></tr>`).join('');
      }

      async function fetchSummaries() {
        const res = await fetch('/api/summaries');
        const s = await res.json();
        buyBody.innerHTML = rows(s.filter(x => x.order_type === 'BUY'));
        sellBody.innerHTML = rows(s.filter(x => x.order_type === 'SELL'));
      }

      async function loop() {
        await fetchSummaries();
        setTimeout(loop, 500);
      }
      loop();
    </script>
  </body>
</html>
    """
    return HTMLResponse(content=html)
