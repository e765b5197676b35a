# pdascope

Tools for working with Solana program derived addresses (PDAs): base58
public keys, the ed25519 curve check, PDA derivation with bump search,
catalogues of seed layouts that are common on Solana, and a formatted
analysis report.

The package uses only the Python standard library and runs on Python 3.10
and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Public keys and derivation

`pdascope.pubkey` provides:

- `Pubkey(value)`: a 32-byte key built from base58 text (at most 44
  characters), raw bytes or another `Pubkey`. `str()` gives base58,
  `bytes()` the raw key; keys compare and hash by their bytes.
  `Pubkey.is_on_curve()` tells whether the key is a valid ed25519 point.
- `b58encode(data)` and `b58decode(text)`: base58 with leading zero bytes
  kept as `1` characters.
- `is_on_curve(data)`: the curve check on 32 raw bytes.
- `create_program_address(seeds, program_id)`: the address for exactly
  these seeds; raises `PubkeyError` if it lies on the curve.
- `find_program_address(seeds, program_id)`: tries bump seeds from 255
  down to 1 and returns `(address, bump)` for the first off-curve address.

Seeds may be `bytes` or `Pubkey` values. At most 16 seeds are allowed
(the bump counts as one in `find_program_address`), each at most 32 bytes;
breaking either limit raises `PubkeyError`, which is a `ValueError`.

```python
from pdascope.pubkey import Pubkey, find_program_address

program = Pubkey("11111111111111111111111111111112")
address, bump = find_program_address([b"state"], program)
print(address, bump)
```

## Ready-made derivations

`pdascope.working_examples` derives real PDAs for common layouts. Each
function returns the derived address and its program id as strings:

- `create_state_pda_example(program_id)`, `create_config_pda_example(program_id)`,
  `create_authority_pda_example(program_id)`: single string seeds.
- `create_sequential_pda_example(program_id, index)`: `"pool"` plus a
  64-bit little-endian index.
- `create_authority_pubkey_pda_example(program_id, authority)`.
- `create_governance_pda_example(program_id, realm, proposal_id)`: with a
  32-bit little-endian proposal id.
- `create_ata_example(wallet, mint)`: the associated token account.
- `create_metaplex_metadata_example(mint)`: the Metaplex metadata account.

`run_working_examples()` derives and prints all of them for a set of test
keys.

```python
from pdascope.working_examples import create_ata_example

ata, program = create_ata_example(
    "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM",
    "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
)
```

## Seed catalogues

`pdascope.spl_token_examples`, `pdascope.metaplex_examples` and
`pdascope.real_world_examples` hold the expected seeds of well-known
accounts: associated token accounts, token and NFT metadata, master and
print editions, candy machine configs, auction houses, DEX market and pool
authorities, name-service records, staking state, validator records,
governance proposals, oracle feeds and escrows. Each `*_seeds()` function
returns a list of `bytes`; public keys are 32 bytes and integers are
little-endian.

```python
from pdascope.metaplex_examples import edition_account_seeds

seeds = edition_account_seeds()
```

Each of these modules also has an `EXAMPLES` list of
`pdascope.catalog.PdaExample` entries and a `run_*_examples()` function that
prints them with `pdascope.catalog.print_examples`. The addresses in these
lists are recorded as they are; they are not derived or checked.

## Analysis report

`pdascope.display` holds the report data classes (`SeedInfo`,
`PdaAnalysisResult`, `PatternStats`, `AnalysisSummary`) and
`AnalysisDisplay`, whose `render()` returns the report text and
`display_full_report()` prints it. `format_address()` shortens addresses
longer than 44 characters and `count_unique_programs()` counts distinct
program ids. `create_demo_analysis()` builds a demonstration data set and
`run_formatted_demo()` prints its report.

## Commands

Print every catalogued example:

```
pda-examples
```

Print the formatted report for the demonstration data:

```
pda-display-demo
```

## What it does not do

The package does not connect to a Solana cluster, fetch accounts or
transactions, or store results. It does not recover the seeds of an
arbitrary address: the report shows the analysis data it is given, and the
only data set included is the demonstration one.