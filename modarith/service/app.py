"""modarith FastAPI application.

Thin HTTP surface over the engine.  Integers travel as JSON integers or
decimal strings and are always returned as decimal strings.

Endpoints:
- POST /egcd      – gcd and Bézout coefficients
- POST /inverse   – modular inverse (``null`` when none exists)
- POST /mulmod    – modular multiplication, optional strategy / fixed width
- POST /powmod    – modular exponentiation
- POST /residue   – one residue-class operation (add, sub, mul, neg, inv, div)
- GET  /journal   – the hash-chained operation journal

Contract violations (bad modulus, missing operand, gcd(0, 0)) answer 400;
oversized operands and fixed-width overflow answer 422.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Dict, List, Literal, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import AfterValidator, BaseModel, Field

from modarith.arith.egcd import extended_gcd
from modarith.arith.fixed import fixed_width
from modarith.arith.inverse import mod_inverse
from modarith.arith.mulmod import MulModStrategy, mul_mod, pow_mod
from modarith.config import JOURNAL_ENABLED, MAX_OPERAND_BITS
from modarith.residue import Residue
from modarith.service.journal import Journal


def _parse_operand(v: Union[str, int]) -> int:
    n = int(v)
    if n.bit_length() > MAX_OPERAND_BITS:
        raise ValueError(f"operand exceeds {MAX_OPERAND_BITS} bits")
    return n


Operand = Annotated[Union[int, str], AfterValidator(_parse_operand)]

# ------ request models ------


class EgcdRequest(BaseModel):
    a: Operand
    b: Operand


class InverseRequest(BaseModel):
    a: Operand
    modulus: Operand


class MulModRequest(BaseModel):
    a: Operand
    b: Operand
    modulus: Operand
    strategy: MulModStrategy = MulModStrategy.AUTO
    # Run on a fixed-width signed backend of this many bits instead of int.
    width: Optional[int] = Field(default=None, ge=8, le=1024)


class PowModRequest(BaseModel):
    base: Operand
    exponent: Operand
    modulus: Operand


class ResidueRequest(BaseModel):
    op: Literal["add", "sub", "mul", "neg", "inv", "div"]
    x: Operand
    y: Optional[Operand] = None
    modulus: Operand


class JournalResponse(BaseModel):
    entries: List[Dict[str, Any]]
    chain_valid: bool


def _str_or_none(v) -> Optional[str]:
    return None if v is None else str(int(v))


def create_app(journal: Journal | None = None, record: bool = JOURNAL_ENABLED) -> FastAPI:
    """Build the service around *journal* (a fresh one if not given)."""
    if journal is None:
        journal = Journal()

    app = FastAPI(title="modarith")

    def _run(operation: str, data: Dict[str, Any], fn: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
        try:
            result = fn()
        except ValueError as exc:
            if record:
                journal.record(operation, "rejected", {**data, "error": str(exc)})
            raise HTTPException(400, str(exc))
        except OverflowError as exc:
            if record:
                journal.record(operation, "rejected", {**data, "error": str(exc)})
            raise HTTPException(422, str(exc))
        if record:
            absent = any(v is None for v in result.values())
            journal.record(operation, "absent" if absent else "ok", {**data, **result})
        return result

    @app.post("/egcd")
    async def egcd(req: EgcdRequest):
        def compute():
            g, x, y = extended_gcd(req.a, req.b)
            return {"gcd": str(g), "x": str(x), "y": str(y)}

        return _run("egcd", {"a": str(req.a), "b": str(req.b)}, compute)

    @app.post("/inverse")
    async def inverse(req: InverseRequest):
        def compute():
            inv = mod_inverse(req.a, req.modulus)
            return {"inverse": _str_or_none(inv)}

        result = _run("inverse", {"a": str(req.a), "modulus": str(req.modulus)}, compute)
        return {**result, "invertible": result["inverse"] is not None}

    @app.post("/mulmod")
    async def mulmod(req: MulModRequest):
        def compute():
            a, b, m = req.a, req.b, req.modulus
            if req.width is not None:
                cls = fixed_width(req.width)
                a, b, m = cls(a), cls(b), cls(m)
            return {"result": str(int(mul_mod(a, b, m, req.strategy)))}

        data = {
            "a": str(req.a),
            "b": str(req.b),
            "modulus": str(req.modulus),
            "strategy": req.strategy.value,
            "width": req.width,
        }
        return _run("mulmod", data, compute)

    @app.post("/powmod")
    async def powmod(req: PowModRequest):
        def compute():
            return {"result": _str_or_none(pow_mod(req.base, req.exponent, req.modulus))}

        data = {"base": str(req.base), "exponent": str(req.exponent), "modulus": str(req.modulus)}
        return _run("powmod", data, compute)

    @app.post("/residue")
    async def residue(req: ResidueRequest):
        def compute():
            x = Residue(req.x, req.modulus)
            if req.op == "neg":
                return {"value": str(int(-x))}
            if req.op == "inv":
                return {"value": _str_or_none(x.inverse())}
            if req.y is None:
                raise ValueError(f"operation '{req.op}' needs operand y")
            y = Residue(req.y, req.modulus)
            if req.op == "add":
                return {"value": str(int(x + y))}
            if req.op == "sub":
                return {"value": str(int(x - y))}
            if req.op == "mul":
                return {"value": str(int(x * y))}
            return {"value": _str_or_none(x.div(y))}

        data = {"op": req.op, "x": str(req.x), "y": _str_or_none(req.y), "modulus": str(req.modulus)}
        result = _run("residue", data, compute)
        return {**result, "modulus": str(req.modulus)}

    @app.get("/journal")
    async def get_journal() -> JournalResponse:
        return JournalResponse(entries=journal.entries(), chain_valid=journal.verify_chain())

    return app


app = create_app()
