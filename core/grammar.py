"""
Nekonomicon Grammar Definition.

This module contains the Lark grammar for Nekonomicon spells. Two start
rules are exposed: `spell` parses the first command and ignores whatever
follows it, `script` parses every command in a multi-line source.
"""

nekonomicon_grammar = r"""
    spell: command _REMAINDER?
    script: command*

    command: module signature* _TERMINATOR
           | signature+ _TERMINATOR

    // --- Modules ---
    module: NAME module_args?
    module_args: "(" (data ("," data)*)? ")"
               | data (","? data)*

    // --- Data ---
    data: text | hinted_variable | record | container | literal
    text: TEXT
    hinted_variable: HINTED_VARIABLE
    record: RECORD
    container: CONTAINER
    literal: NUMBER | NAME

    // --- Signatures ---
    signature: trace_sig | elapsed_sig | silent_sig | timeout_sig | on_sig
    trace_sig: _TRACE
    elapsed_sig: _ELAPSED
    silent_sig: _SILENT
    timeout_sig: _TIMEOUT TIMEOUT_VALUE UNIT
    on_sig: _ON NAME+

    // --- Terminals ---
    _TERMINATOR: "."
    _TRACE: /trace(?![\w-])/
    _ELAPSED: /elapsed(?![\w-])/
    _SILENT: /silent(?![\w-])/
    _TIMEOUT: /timeout(?![\w-])/
    _ON: /on(?![\w-])/

    TEXT: /'(?:[^'\\]|\\.)*'/s
    HINTED_VARIABLE: /@[\w-]+\{[^}]*\}/
    RECORD: /@[\w-]+/
    CONTAINER: /::[A-Za-z_][\w-]*(?::[A-Za-z_][\w-]*)?/
    NUMBER: /-?\d+(\.\d+)?/
    TIMEOUT_VALUE: /[\w-]+(\.\d+)?/
    UNIT: /(?!(?:trace|elapsed|silent|timeout|on)(?![\w-]))[A-Za-z]+/

    NAME: /(?!(?:trace|elapsed|silent|timeout|on)(?![\w-]))[A-Za-z_][\w-]*/

    _REMAINDER: /.+/s

    COMMENT: /~[^\n]*/

    %import common.WS
    %ignore WS
    %ignore COMMENT
"""
