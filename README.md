# notifyflow

A small concurrent notification pipeline. Notifications flow through a chain of
stages connected by closable, thread-safe channels; each stage runs in its own
background thread and returns the channel it writes to.

1. **producer** (`notifyflow.producer.produce`) – emits a batch of
   `Notification(id, type, message)` records: a built-in set of five by
   default, or the ones you pass. An empty batch is reported on the error
   channel.
2. **processor** (`notifyflow.processor.process`) – reports notifications with
   an empty message and normalises the rest: trimmed, upper-cased and prefixed
   with `[Processed] `. Each processed notification is recorded as a history
   `Entry` with stage `"Processor"`.
3. **limiter** (`notifyflow.limiter.rate_limiter`) – forwards at most one
   notification per tick of the given interval. A notification that arrives
   with no tick pending is reported on the error channel, held back for one
   interval, recorded in history with stage `"Rate Limiter"`, and then
   forwarded anyway.
4. **dispatcher** (`notifyflow.dispatcher.route`) – routes each notification by
   its type (`Email`, `SMS`, `Webhook`, `Push`) to the matching channel of a
   `DispatchMap` (`email`, `sms`, `webhook`, `push`). Other types are reported
   on the error channel and logged.
5. **sender** (`notifyflow.sender.send_email`, `send_sms`, `send_webhook`,
   `send_push`) – waits for a delivery delay (1, 0.5, 2 and 2 seconds by
   default, set with `delay=`), records the notification in the process-wide
   history store, sends an `Entry` such as `"Email Sender"` on the history
   channel and emits a result line such as
   `[Email Sent] ID: 1, Message: [Processed] WELCOME EMAIL`.

Logging goes to standard output through `notifyflow.logger` (`info`, `error`,
`fatal`), each line prefixed with `NOTIFY-SYSTEM: ` and a timestamp; `fatal`
logs and exits with status 1.

## Installation

```
pip install .
```

## Running the pipeline

```
notifyflow
```

The command runs the whole pipeline on the built-in notifications, prints each
result as `[<Transport> Result] ...` and each error as `[Error Error] ...`,
and logs its progress. When every sender has finished, or the timeout is
reached, or it is interrupted with Ctrl-C, it shuts down and writes the
process-wide history store to a JSON file. That store holds the entries the
senders record (stages `email`, `sms`, `webhook` and `sender` for push).

Options:

- `--timeout SECONDS` – how long to wait for the pipeline (default 10)
- `--interval SECONDS` – rate limiter interval (default 0.5)
- `--output PATH` – file the history is exported to (default `history.json`)

## Using the stages

```python
from notifyflow.channel import Channel
from notifyflow.producer import Notification
from notifyflow.processor import process

inbox = Channel(1)
errors = Channel(1)
history = Channel(1)

inbox.send(Notification(id=1, type="Email", message="  hello world "))
inbox.close()

for notification in process(inbox, errors, history):
    print(notification.message)   # [Processed] HELLO WORLD
```

A `Channel(maxsize=0)` is unbounded by default; with a positive `maxsize`,
`send` blocks while it is full. It can be iterated until it is closed and
drained. `receive(timeout)` raises `TimeoutError` when nothing arrives in time
and `ChannelClosed` once the channel is closed and empty; sending on, or
closing, a closed channel raises `ChannelClosed`.

## History

`notifyflow.history` provides a thread-safe `Store` (`add`, `all`, `export`)
and a process-wide store reached through `store_notification`,
`get_all_history` and `export_to_file`:

```python
from notifyflow.history import store_notification, get_all_history, export_to_file
from notifyflow.producer import Notification

store_notification(Notification(id=2, type="SMS", message="code"), "sms")
print(get_all_history())
export_to_file("history.json")
```

The export is an indented JSON list of objects with `Stage`, `Notification`
(`ID`, `Type`, `Message`) and `Message` keys.

## What it does not do

Nothing is actually delivered: the senders only wait for their delay and
produce a result line. There is no e-mail, SMS, webhook or push transport, and
the history is kept in memory until it is exported.

## Tests

```
pip install ".[test]"
pytest
```