# token_metadata.py

import logging
import struct

from solana.rpc.commitment import Confirmed
from solana.rpc.types import TxOpts
from solders.instruction import AccountMeta, Instruction
from solders.message import Message
from solders.pubkey import Pubkey
from solders.system_program import ID as SYS_PROGRAM_ID
from solders.transaction import Transaction

logger = logging.getLogger(__name__)

# Metaplex Token Metadata program
METADATA_PROGRAM_ID = Pubkey.from_string("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")

CREATE_METADATA_ACCOUNT_V3 = 33

MAX_NAME_LENGTH = 32
MAX_SYMBOL_LENGTH = 10
MAX_URI_LENGTH = 200


def find_metadata_address(mint: Pubkey) -> Pubkey:
    pda, _ = Pubkey.find_program_address(
        [b"metadata", bytes(METADATA_PROGRAM_ID), bytes(mint)],
        METADATA_PROGRAM_ID,
    )
    return pda


def _borsh_string(field, value, max_length):
    raw = value.encode("utf-8")
    if len(raw) > max_length:
        raise ValueError(f"Token {field} is {len(raw)} bytes, the limit is {max_length}.")
    return struct.pack("<I", len(raw)) + raw


def pack_create_metadata_account_v3(name, symbol, uri, seller_fee_basis_points=0, is_mutable=True):
    """
    Instruction data for CreateMetadataAccountV3:

        u8 discriminator | DataV2 | bool is_mutable | Option<CollectionDetails>

    DataV2 is name, symbol, uri (u32-prefixed strings), u16 seller fee and
    three Option fields (creators, collection, uses), all left as None here.
    """
    data = bytes([CREATE_METADATA_ACCOUNT_V3])
    data += _borsh_string("name", name, MAX_NAME_LENGTH)
    data += _borsh_string("symbol", symbol, MAX_SYMBOL_LENGTH)
    data += _borsh_string("uri", uri, MAX_URI_LENGTH)
    data += struct.pack("<H", seller_fee_basis_points)
    data += bytes([0, 0, 0])  # creators, collection, uses
    data += bytes([1 if is_mutable else 0])
    data += bytes([0])  # collection details
    return data


def create_metadata_account_v3(
    mint: Pubkey,
    mint_authority: Pubkey,
    payer: Pubkey,
    update_authority: Pubkey,
    name: str,
    symbol: str,
    uri: str,
    seller_fee_basis_points: int = 0,
    is_mutable: bool = True,
) -> Instruction:
    metadata = find_metadata_address(mint)
    return Instruction(
        program_id=METADATA_PROGRAM_ID,
        accounts=[
            AccountMeta(metadata, is_signer=False, is_writable=True),
            AccountMeta(mint, is_signer=False, is_writable=False),
            AccountMeta(mint_authority, is_signer=True, is_writable=False),
            AccountMeta(payer, is_signer=True, is_writable=True),
            AccountMeta(update_authority, is_signer=False, is_writable=False),
            AccountMeta(SYS_PROGRAM_ID, is_signer=False, is_writable=False),
        ],
        data=pack_create_metadata_account_v3(name, symbol, uri, seller_fee_basis_points, is_mutable),
    )


def attach_metadata(client, payer, mint: Pubkey, name: str, symbol: str, uri: str):
    """Create the metadata account for `mint`, with `payer` as every authority. Returns the signature."""
    instruction = create_metadata_account_v3(
        mint=mint,
        mint_authority=payer.pubkey(),
        payer=payer.pubkey(),
        update_authority=payer.pubkey(),
        name=name,
        symbol=symbol,
        uri=uri,
    )
    logger.info("Metadata account: %s", instruction.accounts[0].pubkey)

    blockhash = client.get_latest_blockhash().value.blockhash
    message = Message.new_with_blockhash([instruction], payer.pubkey(), blockhash)
    txn = Transaction([payer], message, blockhash)
    resp = client.send_transaction(
        txn, opts=TxOpts(skip_confirmation=False, preflight_commitment=Confirmed)
    )
    return resp.value
