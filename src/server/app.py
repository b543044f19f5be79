from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from typing import Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from dispatch import Dispatcher, FleetConfig, TripRejected, event_to_dict, report_to_dict

logger = logging.getLogger(__name__)


class TripRequest(BaseModel):
    pickup_floor: int
    dropoff_floor: int


class DispatchManager:
    def __init__(self, num_floors: int = 10, car_count: int = 2, tick_interval: float = 1.0) -> None:
        self.dispatcher = Dispatcher(FleetConfig(num_cars=car_count, num_floors=num_floors))
        self.tick_interval = tick_interval
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._run())
            logger.info("Dispatch loop started, ticking every %ss", self.tick_interval)

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
            logger.info("Dispatch loop stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.tick_interval)
            payload = await self.step()
            await self.broadcast(payload)

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        async with self._lock:
            state = self.current_state()
        await websocket.send_text(json.dumps(state))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        state = self.dispatcher.snapshot()
        state["pending_count"] = self.dispatcher.pending_count
        return state

    async def state(self) -> dict:
        async with self._lock:
            return self.current_state()

    async def request_trip(self, pickup_floor: int, dropoff_floor: int) -> dict:
        async with self._lock:
            outcome = self.dispatcher.request_trip(pickup_floor, dropoff_floor)
            if isinstance(outcome, TripRejected):
                raise ValueError(outcome.reason.value)
            state = self.current_state()
            state["outcome"] = event_to_dict(outcome)
            return state

    async def step(self) -> dict:
        async with self._lock:
            report = self.dispatcher.step()
            state = self.current_state()
            state["report"] = report_to_dict(report)
            return state


def create_app(manager: Optional[DispatchManager] = None, autostart: bool = True) -> FastAPI:
    manager = manager or DispatchManager()
    app = FastAPI(title="liftdispatch API")
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        if autostart:
            await manager.start()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await manager.stop()

    @app.get("/state")
    async def get_state() -> dict:
        return await manager.state()

    @app.post("/trips")
    async def request_trip(request: TripRequest) -> dict:
        try:
            return await manager.request_trip(request.pickup_floor, request.dropoff_floor)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

    @app.post("/step")
    async def step() -> dict:
        return await manager.step()

    @app.websocket("/ws/stream")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await manager.register(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            await manager.unregister(websocket)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
