"""Tool descriptions and the usage prompt exposed over MCP."""

ARG_TYPES = """Acceptable arg types:
  string, shortString, binaryString, binaryShortString, text, byteArray: string
  number: number
  boolean: boolean
  option, editableOption, editableOptionShort, argSelector: string (one of the listed values)
  populateOption, populateMultiOption: "" (empty string)
  toggleString: {"string": "<value>", "option": "<interpretation, e.g. Hex/UTF8>"}"""

OPS_LIST_DESCRIPTION = """Returns a list of CyberChef operations that can be passed into cyberchef-bake.
Run cyberchef-op-args before choosing arguments."""

OP_ARGS_DESCRIPTION = f"""Given an operation name, returns its description and args.
Names match case- and punctuation-insensitively ("from base64" finds "From Base64").

{ARG_TYPES}"""

BAKE_DESCRIPTION = """A recipe is composed of multiple "ingredients" (operations).
The "baking" applies each operation in order, returning the final result as text.
Example: {"input": "NTMgNDUgNTYgNGQgNTQgNDUgMzggNjcgNTYgMzAgMzkgNTMgNTQgNDUgNTEgM2Q=",
  "recipe": [{"op": "From Base64", "args": ["A-Za-z0-9+/=", true, false]},
             {"op": "From Hex", "args": ["Space"]},
             {"op": "From Base64", "args": []}]}
Run cyberchef-ops-list before choosing operations.
Run cyberchef-op-args for each op before choosing arguments.
Returns the CyberChef shareable URL and UTF-8 encoded text result of baking."""

USAGE_PROMPT = """CyberChef - The Cyber Swiss Army Knife
A tool for encryption, encoding, compression and data analysis.
CyberChef allows you to chain together operations into a single
"recipe" before baking. Data is passed between operations in a
recipe as raw bytes without re-encoding.

Steps for using CyberChef
1. List the available operations
2. Get the arguments for operations you want to use
3. Construct a recipe of operations and arguments to crack the code.
4. You may run operations individually to check results.
5. Construct a single recipe to crack the code and run it to verify the results.
6. Provide the user with the recipe, results, and URL.

DO NOT ATTEMPT MANUAL DATA MANIPULATION ALWAYS USE THE TOOLS.
RECIPE OUTPUT IS UTF-8 ENCODED
"""
