"""
Send a contract call or deployment and wait for it to be mined
"""
from web3 import Web3

from utils.exceptions import RemoteCallError
from utils.logging_setup import logger
from utils.web3_singleton import Web3Singleton
import config


def send_transaction(contract_call, signer, description):
    """Send a transaction and wait for its receipt

    Args:
        contract_call: bound contract function or constructor
            (anything with ``build_transaction`` and ``transact``)
        signer: Signer sending the transaction
        description: short label used in log lines and errors

    Returns:
        The transaction receipt

    Raises:
        RemoteCallError: if the mined receipt reports failure
    """
    w3 = Web3Singleton.get_instance()

    if signer.is_local:
        nonce = w3.eth.get_transaction_count(signer.address)
        tx = contract_call.build_transaction({
            'from': signer.address,
            'nonce': nonce,
            'chainId': w3.eth.chain_id
        })
        signed_tx = w3.eth.account.sign_transaction(tx, signer.private_key)
        tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)
    else:
        tx_hash = contract_call.transact({'from': signer.address})

    tx_hash_hex = Web3.to_hex(tx_hash)
    logger.info(f"{description} transaction sent: {tx_hash_hex}")

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=config.TX_TIMEOUT)

    if receipt['status'] != 1:
        logger.error(f"{description} transaction failed: {tx_hash_hex}")
        raise RemoteCallError(description, tx_hash_hex, receipt)

    return receipt
