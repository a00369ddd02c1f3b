# backend/emailql/routers/graphql.py
import json
from typing import Any, Dict

from ariadne import graphql
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse({"errors": [{"message": message}]}, status_code=400)


def response_status(success: bool, result: Dict[str, Any]) -> int:
    """
    ariadne reports parse/validation failures as unsuccessful.
    Execution that never reached a field (bad variables, unknown operation)
    comes back "successful" with no data and only path-less errors: also 400.
    """
    if not success:
        return 400
    errors = result.get("errors") or []
    if result.get("data") is None and errors and all("path" not in e for e in errors):
        return 400
    return 200


async def execute(request: Request, data: Any) -> JSONResponse:
    success, result = await graphql(
        request.app.state.schema,
        data,
        context_value={"request": request},
        debug=request.app.state.settings.DEBUG,
    )
    return JSONResponse(result, status_code=response_status(success, result))


# ---------------------------------------------------
# GET /graphql?query=...&variables=...&operationName=...
# ---------------------------------------------------
@router.get("/graphql")
async def graphql_get(request: Request):
    params = request.query_params
    data: Dict[str, Any] = {"query": params.get("query")}

    variables = params.get("variables")
    if variables:
        try:
            data["variables"] = json.loads(variables)
        except ValueError:
            return _bad_request("Variables are invalid JSON.")

    if params.get("operationName"):
        data["operationName"] = params.get("operationName")

    return await execute(request, data)


# ---------------------------------------------------
# POST /graphql  {"query": ..., "variables": ..., "operationName": ...}
# ---------------------------------------------------
@router.post("/graphql")
async def graphql_post(request: Request):
    try:
        data = await request.json()
    except ValueError:
        return _bad_request("Request body is not valid JSON.")
    return await execute(request, data)
