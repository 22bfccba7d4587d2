"""
Compiled contract artifacts for deployments.

Hardhat writes ``artifacts/contracts/<File>.sol/<Name>.json``, Foundry writes
``out/<File>.sol/<Name>.json`` and Remix writes ``artifacts/<Name>.json``.
All of them carry an ``abi`` list and the creation bytecode, either as a hex
string or as ``{"object": "..."}``.
"""
import json
from pathlib import Path

from utils.exceptions import ArtifactNotFoundError
from utils.logging_setup import logger
from utils.web3_singleton import Web3Singleton
import config


def find_artifact_path(contract_name, artifacts_dir=None):
    """Locate the artifact JSON for a contract name"""
    root = Path(artifacts_dir or config.ARTIFACTS_DIR)
    target = f"{contract_name}.json"

    if root.is_dir():
        for path in sorted(root.rglob(target)):
            # Hardhat debug files share the directory but not the name
            if path.name == target:
                return path

    raise ArtifactNotFoundError(f"No compiled artifact for {contract_name} under {root}")


def load_artifact(contract_name, artifacts_dir=None):
    """Load a compiled artifact

    Returns:
        dict: {"abi": list, "bytecode": str}
    """
    path = find_artifact_path(contract_name, artifacts_dir)
    with open(path) as f:
        data = json.load(f)

    bytecode = data.get('bytecode') or data.get('data', {}).get('bytecode')
    if isinstance(bytecode, dict):
        bytecode = bytecode.get('object')

    if 'abi' not in data or not bytecode:
        raise ArtifactNotFoundError(f"Artifact {path} has no abi/bytecode")

    if not bytecode.startswith('0x'):
        bytecode = '0x' + bytecode

    logger.info(f"Loaded artifact for {contract_name} from {path}")
    return {"abi": data['abi'], "bytecode": bytecode}


def get_contract_factory(contract_name, artifacts_dir=None):
    """Get a deployable contract class for a compiled contract"""
    artifact = load_artifact(contract_name, artifacts_dir)
    w3 = Web3Singleton.get_instance()
    return w3.eth.contract(abi=artifact['abi'], bytecode=artifact['bytecode'])
