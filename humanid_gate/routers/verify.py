# humanid_gate/routers/verify.py
import logging
from typing import Union

from fastapi import APIRouter, Depends

from humanid_gate.schemas.verify import SbtHoldingOut, VerifyErrorOut
from humanid_gate.services.sbt import CredentialOracle, get_oracle

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Verify"])


# Errors come back as {"error": ...} with a 200, callers check the payload.
@router.get("/verify/{address}", response_model=Union[SbtHoldingOut, VerifyErrorOut])
async def check_sbt(address: str, oracle: CredentialOracle = Depends(get_oracle)):
    try:
        holds = await oracle.holds_credential(address)
    except Exception as e:
        logger.warning("Debug lookup for %s failed: %s", address, e)
        return VerifyErrorOut(error=str(e))
    return SbtHoldingOut(address=address, holdsSBT=holds)
