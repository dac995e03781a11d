# tests for adts.py
import unittest

from agromarket.general.structures.adts import PriorityQueue, Queue, Stack


class TestQueue(unittest.TestCase):
    """FIFO behaviour and empty-queue sentinels"""

    def setUp(self):
        self.queue = Queue()

    def test_01_fifo_order(self):
        for v in (1, 2, 3):
            self.queue.enqueue(v)
        self.assertEqual(self.queue.size(), 3)
        self.assertEqual([self.queue.dequeue() for _ in range(3)], [1, 2, 3])
        self.assertTrue(self.queue.is_empty())

    def test_02_empty_queue_returns_none(self):
        self.assertIsNone(self.queue.dequeue())
        self.assertIsNone(self.queue.peek())
        self.assertEqual(self.queue.size(), 0)

    def test_03_peek_does_not_remove(self):
        self.queue.enqueue("a")
        self.queue.enqueue("b")
        self.assertEqual(self.queue.peek(), "a")
        self.assertEqual(len(self.queue), 2)

    def test_04_contains_clear_and_snapshot(self):
        for v in ("x", "y"):
            self.queue.enqueue(v)
        self.assertTrue(self.queue.contains("y"))
        self.assertNotIn("z", self.queue)
        self.assertEqual(self.queue.to_list(), ["x", "y"])
        self.queue.clear()
        self.assertTrue(self.queue.is_empty())
        self.assertEqual(self.queue.to_list(), [])

    def test_05_reuse_after_drain(self):
        self.queue.enqueue(1)
        self.queue.dequeue()
        self.queue.enqueue(2)
        self.queue.enqueue(3)
        self.assertEqual(self.queue.to_list(), [2, 3])


class TestPriorityQueue(unittest.TestCase):

    def test_01_lowest_priority_number_first(self):
        pq = PriorityQueue()
        pq.enqueue("low", 5)
        pq.enqueue("urgent", 1)
        pq.enqueue("normal", 3)
        self.assertEqual(pq.peek(), "urgent")
        self.assertEqual([pq.dequeue() for _ in range(3)], ["urgent", "normal", "low"])
        self.assertIsNone(pq.dequeue())

    def test_02_equal_priorities_keep_insertion_order(self):
        pq = PriorityQueue()
        pq.enqueue("a", 2)
        pq.enqueue("b", 1)
        pq.enqueue("c", 2)
        pq.enqueue("d", 1)
        self.assertEqual(pq.to_list(), ["b", "d", "a", "c"])

    def test_03_clear(self):
        pq = PriorityQueue()
        pq.enqueue("a", 1)
        pq.clear()
        self.assertTrue(pq.is_empty())
        self.assertEqual(pq.size(), 0)
        self.assertIsNone(pq.peek())


class TestStack(unittest.TestCase):

    def test_01_lifo_order(self):
        stack = Stack()
        for v in (1, 2, 3):
            self.assertTrue(stack.push(v))
        self.assertEqual(stack.to_list(), [3, 2, 1])
        self.assertEqual([stack.pop() for _ in range(3)], [3, 2, 1])
        self.assertIsNone(stack.pop())
        self.assertIsNone(stack.peek())

    def test_02_unbounded_stack_is_never_full(self):
        stack = Stack()
        for v in range(100):
            stack.push(v)
        self.assertFalse(stack.is_full())

    def test_03_bounded_push_fails_when_full(self):
        stack = Stack(max_size=2)
        self.assertTrue(stack.push("a"))
        self.assertTrue(stack.push("b"))
        self.assertTrue(stack.is_full())
        self.assertFalse(stack.push("c"))
        self.assertEqual(stack.size(), 2)
        self.assertFalse(stack.contains("c"))
        self.assertEqual(stack.peek(), "b")

    def test_04_capacity_below_one_is_clamped(self):
        stack = Stack(max_size=0)
        self.assertEqual(stack.max_size, 1)
        self.assertTrue(stack.push("only"))
        self.assertFalse(stack.push("extra"))

    def test_05_clear(self):
        stack = Stack(max_size=1)
        stack.push(1)
        stack.clear()
        self.assertTrue(stack.is_empty())
        self.assertFalse(stack.is_full())


if __name__ == "__main__":
    unittest.main()
